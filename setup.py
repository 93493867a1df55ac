"""
Brightdoc - Markdown chapters to Brightspace D2L HTML

Installation:
    pip install -e .

This installs the 'brightdoc' command and the 'brightdoc-filter' pandoc
filter in your environment.
"""

from setuptools import setup, find_packages
import os

# Read README for long description
long_description = ''
if os.path.exists('README.md'):
    with open('README.md', 'r', encoding='utf-8') as f:
        long_description = f.read()

setup(
    name='brightdoc',
    version='1.0.0',
    description='Pandoc filter and chapter builder for Brightspace D2L course content',
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='MIT',

    # Find all packages (brightdoc/ and any subpackages)
    packages=find_packages(exclude=['tests', 'tests.*', 'docs']),

    include_package_data=True,

    # Python version requirement
    python_requires='>=3.9',

    # Dependencies (pandoc itself is an external program, not a Python package)
    install_requires=[
        'click>=8.0',
        'PyYAML>=6.0',
    ],

    # Optional dependencies
    extras_require={
        'dev': [
            'pytest>=7.4',
            'pytest-cov>=4.1',
            'pytest-mock>=3.11',
        ],
    },

    # CLI entry points
    entry_points={
        'console_scripts': [
            'brightdoc=brightdoc.cli:cli',
            'brightdoc-filter=brightdoc.code_filter:main',
        ],
    },

    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Education',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Education',
        'Topic :: Text Processing :: Markup :: HTML',
    ],

    keywords='pandoc filter brightspace d2l lms education markdown',
)
