"""
Block Translator: run code blocks embedded in plain text files.

Finds ``|> translator: <language>(`` blocks in a file and executes each one
with the matching external toolchain (rustc, javac/java, go, python).
"""

from translator.code_execution import (
    CodeBlock,
    CodeBlockParser,
    ExecutionDispatcher,
    ExecutionResult,
    extract_blocks,
    supported_languages,
)
from translator.config import (
    ConfigError,
    ExecutionConfig,
    ToolchainConfig,
    TranslatorConfig,
    load_config,
    save_config,
)

__version__ = "0.1.0"

__all__ = [
    # Parsing
    "CodeBlock",
    "CodeBlockParser",
    "extract_blocks",
    # Execution
    "ExecutionDispatcher",
    "ExecutionResult",
    "supported_languages",
    # Configuration
    "ConfigError",
    "ExecutionConfig",
    "ToolchainConfig",
    "TranslatorConfig",
    "load_config",
    "save_config",
]
