"""Core constants for Block Translator.

This module defines shared constants used across the package to ensure
consistency and avoid hardcoded values in multiple locations.
"""

MARKER_PREFIX = "|> translator:"
"""Prefix (after stripping whitespace) of a line that opens a code block."""

# Language tokens understood by the execution dispatcher
LANGUAGE_RUST = "rust"
LANGUAGE_JAVA = "java"
LANGUAGE_GO = "go"
LANGUAGE_PYTHON = "python"

# Default toolchain executables
DEFAULT_RUSTC = "rustc"
DEFAULT_JAVAC = "javac"
DEFAULT_JAVA = "java"
DEFAULT_GO = "go"
DEFAULT_PYTHON = "python3"
"""Interpreter used for python blocks.

``python3`` rather than ``python`` because many distributions no longer ship
an unversioned ``python`` executable.
"""

USAGE = "Usage: translator <hacker_file> [--verbose]"
VERBOSE_FLAG = "--verbose"
