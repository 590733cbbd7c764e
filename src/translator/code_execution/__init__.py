"""Code execution module for running marker-delimited code blocks."""

from .executor import ExecutionDispatcher, ExecutionResult, supported_languages
from .parser import CodeBlock, CodeBlockParser, extract_blocks

__all__ = [
    "ExecutionDispatcher",
    "ExecutionResult",
    "supported_languages",
    "CodeBlock",
    "CodeBlockParser",
    "extract_blocks",
]
