# errors.py
"""
Custom exception classes with readable error messages for Brightdoc

All exceptions include:
- Clear error description
- Actionable suggestions
- Relevant context
"""
from pathlib import Path
from typing import Optional, Dict, Any, List


class BrightdocError(Exception):
    """Base exception for all Brightdoc errors"""

    def __init__(
        self,
        message: str,
        suggestion: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        self.message = message
        self.suggestion = suggestion
        self.context = context or {}
        self.cause = cause
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format error with all details"""
        lines = [
            "",
            "=" * 70,
            f"❌ {self.__class__.__name__}",
            "=" * 70,
            "",
            self.message,
        ]

        if self.context:
            lines.append("")
            lines.append("Context:")
            for key, value in self.context.items():
                lines.append(f"  {key}: {value}")

        if self.suggestion:
            lines.append("")
            lines.append("💡 Suggestion:")
            lines.append(f"  {self.suggestion}")

        if self.cause:
            lines.append("")
            lines.append(f"Caused by: {type(self.cause).__name__}: {self.cause}")

        lines.append("")
        lines.append("=" * 70)
        lines.append("")

        return "\n".join(lines)


class ConfigurationError(BrightdocError):
    """Configuration is missing or invalid"""
    pass


class ConversionError(BrightdocError):
    """Pandoc could not be run or failed to convert a document"""
    pass


class PandocNotFoundError(ConversionError):
    """The pandoc executable could not be found"""
    pass


class AstFormatError(BrightdocError):
    """Filter input is not a pandoc JSON document"""
    pass


# Specific error factory functions

def pandoc_not_found_error(executable: str, cause: Optional[Exception] = None) -> PandocNotFoundError:
    """Create error for a missing pandoc executable"""
    return PandocNotFoundError(
        message=f"Pandoc executable not found: {executable}",
        suggestion=(
            "Install pandoc (https://pandoc.org/installing.html) or point\n"
            "Brightdoc at it:\n"
            "  export BRIGHTDOC_PANDOC=/path/to/pandoc\n\n"
            "Or add to brightdoc.yaml:\n"
            "  pandoc: /path/to/pandoc"
        ),
        context={
            "executable": executable,
            "env_var": "BRIGHTDOC_PANDOC",
        },
        cause=cause
    )


def missing_source_dir_error(source_dir: Path) -> ConfigurationError:
    """Create error when the chapter folder does not exist"""
    return ConfigurationError(
        message=f"Source folder not found: {source_dir}",
        suggestion=(
            "Run the build from the folder that holds your chapters, or set\n"
            "the folder explicitly:\n"
            "  brightdoc build --source chapters/\n\n"
            "Or add to brightdoc.yaml:\n"
            "  source_dir: chapters"
        ),
        context={
            "source_dir": str(source_dir),
            "env_var": "BRIGHTDOC_SOURCE_DIR",
        }
    )


def conversion_failed_error(
    source_file: Path,
    returncode: int,
    stderr: str
) -> ConversionError:
    """Create error when pandoc exits with a failure status"""
    return ConversionError(
        message=f"Pandoc failed to convert {source_file.name}",
        suggestion=(
            "Check the pandoc output above. Common issues:\n"
            "  - Unbalanced fenced code blocks\n"
            "  - brightdoc-filter not on PATH (reinstall with: pip install -e .)"
        ),
        context={
            "file": str(source_file),
            "returncode": returncode,
            "stderr": stderr.strip() or "(empty)",
        }
    )


def invalid_ast_error(missing_keys: List[str], cause: Optional[Exception] = None) -> AstFormatError:
    """Create error for filter input that is not a pandoc document"""
    return AstFormatError(
        message="Input is not a pandoc JSON document",
        suggestion=(
            "brightdoc-filter is meant to be run by pandoc:\n"
            "  pandoc chapter.md -t html --filter brightdoc-filter"
        ),
        context={
            "missing_keys": missing_keys,
        },
        cause=cause
    )
