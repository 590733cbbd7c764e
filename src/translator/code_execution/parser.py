"""Marker-delimited code block parser.

Blocks are opened by a marker line such as ``|> translator: python(`` and run
until the parentheses opened by the marker are balanced again. Balance is a
plain character count over every captured line: parentheses inside string
literals or comments of the target language are counted too, so a literal
``")"`` can close a block early. This is a known limitation of the format.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from translator.constants import MARKER_PREFIX

logger = logging.getLogger(__name__)


class ParserState(Enum):
    """Parser state machine states."""

    OUTSIDE = "outside"  # Looking for a marker line
    CAPTURING = "capturing"  # Inside a block, tracking paren depth


@dataclass(frozen=True)
class CodeBlock:
    """A code block extracted from a marked-up file."""

    language: str
    code: str
    line_number: int = 0  # 1-based line of the opening marker

    def to_dict(self):
        """Convert to dictionary for JSON serialization."""
        return {
            "language": self.language,
            "code": self.code,
            "line_number": self.line_number,
        }


def parse_marker(line: str) -> Optional[str]:
    """Return the language named by a marker line, or None.

    Args:
        line: Raw line of input

    Returns:
        Language token (text between the first ``:`` and the first ``(``,
        trimmed), or None if the line is not a marker or names no language.
    """
    stripped = line.strip()
    if not stripped.startswith(MARKER_PREFIX):
        return None

    spec = stripped.split(":", 1)[1]
    language = spec.strip().split("(", 1)[0].strip()
    return language or None


class CodeBlockParser:
    """Incrementally parse marker-delimited code blocks line by line.

    The marker line opens the block at depth 1; its own parentheses are not
    counted. Following lines are appended to the block and their ``(``/``)``
    characters adjust the depth, checked once each line has been counted. A
    line that leaves depth at exactly 0 closes the block; its last ``)`` is
    the delimiter and is left out of the code. A line that leaves depth below
    0 drops the block, as does end of input while it is still open.

    Example:
        parser = CodeBlockParser()
        for line in content.splitlines():
            block = parser.feed_line(line)
            if block:
                print(f"Found {block.language} code: {block.code}")
        parser.finalize()
    """

    def __init__(self):
        """Initialize parser state."""
        self.state = ParserState.OUTSIDE
        self.line_number = 0
        self.current_language = ""
        self.current_code = ""
        self.current_start_line = 0
        self.depth = 0
        self.completed_blocks: List[CodeBlock] = []

    def feed_line(self, line: str) -> Optional[CodeBlock]:
        """Feed one line of input and return a block if it closed one.

        Args:
            line: Line of input without its line terminator

        Returns:
            The completed CodeBlock, or None
        """
        self.line_number += 1

        if self.state == ParserState.OUTSIDE:
            self._handle_outside(line)
            return None

        return self._handle_capturing(line)

    def _handle_outside(self, line: str):
        """Handle a line while looking for a marker."""
        language = parse_marker(line)
        if language is None:
            return

        self.state = ParserState.CAPTURING
        self.current_language = language
        self.current_code = ""
        self.current_start_line = self.line_number
        self.depth = 1

    def _handle_capturing(self, line: str) -> Optional[CodeBlock]:
        """Handle a line inside a block."""
        self.depth += line.count("(") - line.count(")")

        if self.depth > 0:
            self.current_code += line + "\n"
            return None

        if self.depth < 0:
            logger.info(
                f"Unbalanced block for {self.current_language} "
                f"(line {self.current_start_line}) dropped"
            )
            self._reset_state()
            return None

        # Depth is back to 0, so the line's last ")" is the delimiter
        closing = line.rfind(")")
        self.current_code += line[:closing] + line[closing + 1 :]
        return self._close_block()

    def _close_block(self) -> CodeBlock:
        """Emit the block being captured and go back to scanning."""
        block = CodeBlock(
            language=self.current_language,
            code=self.current_code.strip(),
            line_number=self.current_start_line,
        )
        self.completed_blocks.append(block)
        logger.info(f"Extracted {block.language} block")
        self._reset_state()
        return block

    def _reset_state(self):
        """Reset parser state for the next block."""
        self.state = ParserState.OUTSIDE
        self.current_language = ""
        self.current_code = ""
        self.current_start_line = 0
        self.depth = 0

    def finalize(self):
        """Finish parsing, dropping any block left open at end of input."""
        if self.state == ParserState.CAPTURING:
            logger.info(
                f"Unclosed block for {self.current_language} "
                f"(line {self.current_start_line}) dropped"
            )
            self._reset_state()

    def get_all_blocks(self) -> List[CodeBlock]:
        """Get all code blocks completed so far.

        Returns:
            List of CodeBlock objects in input order
        """
        return self.completed_blocks.copy()

    def reset(self):
        """Reset parser state for reuse."""
        self._reset_state()
        self.line_number = 0
        self.completed_blocks = []


def extract_blocks(content: str) -> List[CodeBlock]:
    """Extract every closed code block from file content.

    Args:
        content: Full text of the input file

    Returns:
        List of CodeBlock objects in the order their markers appear
    """
    parser = CodeBlockParser()
    for line in content.splitlines():
        parser.feed_line(line)
    parser.finalize()
    return parser.get_all_blocks()
