"""
results.py - What a filter callback tells the traversal engine

Every callback returns exactly one of:
    UNCHANGED       no opinion; the element is kept as pandoc produced it
    Replace(node)   substitute node for the element
    DELETE          drop the element from its containing list
"""

from dataclasses import dataclass
from typing import Union

from brightdoc.nodes import Node


class _Unchanged:
    def __repr__(self) -> str:
        return "UNCHANGED"


class _Delete:
    def __repr__(self) -> str:
        return "DELETE"


@dataclass(frozen=True)
class Replace:
    node: Node


UNCHANGED = _Unchanged()
DELETE = _Delete()

Result = Union[_Unchanged, Replace, _Delete]
