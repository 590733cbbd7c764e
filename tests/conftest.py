"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

from translator.code_execution import ExecutionDispatcher
from translator.config import ExecutionConfig, ToolchainConfig, TranslatorConfig

# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def python_config():
    """Config whose python toolchain is the interpreter running the tests."""
    return TranslatorConfig(
        toolchains=ToolchainConfig(python=sys.executable),
        execution=ExecutionConfig(),
    )


@pytest.fixture
def dispatcher(python_config):
    """Dispatcher wired to the test interpreter."""
    return ExecutionDispatcher(python_config)


# ============================================================================
# Input File Fixtures
# ============================================================================


@pytest.fixture
def write_input(tmp_path):
    """Return a helper that writes an input file and returns its path."""

    def _write(content: str, name: str = "program.hack") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_python_block():
    """A well-formed python block as it appears in an input file."""
    return '|> translator: python(\nprint("hi")\n)\n'

