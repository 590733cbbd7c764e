#!/usr/bin/env python3
"""Command-line interface for Block Translator.

Usage: translator <hacker_file> [--verbose]
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from translator.code_execution import ExecutionDispatcher, extract_blocks
from translator.config import TranslatorConfig
from translator.constants import USAGE, VERBOSE_FLAG
from translator.logging_config import configure_logging

logger = logging.getLogger(__name__)


def run_file(path: Path, dispatcher: ExecutionDispatcher):
    """Extract and execute every block in a file, printing each result.

    Args:
        path: Input file to scan
        dispatcher: Dispatcher used for every block

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    content = path.read_text(encoding="utf-8")
    blocks = extract_blocks(content)
    logger.info(f"Found {len(blocks)} block(s) in {path}")

    for block in blocks:
        result = dispatcher.execute(block)
        if result.success:
            print(f"[{block.language}] Output:\n{result.output}")
        else:
            print(f"[{block.language}] Error: {result.error_message}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Args:
        argv: Arguments after the program name (defaults to sys.argv[1:])

    Returns:
        Process exit status
    """
    if argv is None:
        argv = sys.argv[1:]

    if len(argv) < 1:
        print(USAGE, file=sys.stderr)
        return 1

    file_path = Path(argv[0])
    verbose = len(argv) > 1 and argv[1] == VERBOSE_FLAG
    configure_logging(verbose)

    dispatcher = ExecutionDispatcher(TranslatorConfig.create_default())

    try:
        run_file(file_path, dispatcher)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
