"""Per-language execution of extracted code blocks.

Each supported language maps to a handler that prepares the source, runs the
toolchain as a subprocess and turns its exit status into an ExecutionResult.
Compiled languages get a fresh scratch directory that is removed as soon as
the block finishes, whatever the outcome.
"""

import logging
import subprocess
import tempfile
import time
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterator, List, Optional

from translator.config import TranslatorConfig
from translator.constants import (
    LANGUAGE_GO,
    LANGUAGE_JAVA,
    LANGUAGE_PYTHON,
    LANGUAGE_RUST,
)

from .parser import CodeBlock

logger = logging.getLogger(__name__)


@dataclass
class ExecutionResult:
    """Result of executing one code block."""

    success: bool
    output: str
    error_message: Optional[str]
    exit_code: Optional[int] = None  # None when no process ran to completion
    execution_time: float = 0.0

    @classmethod
    def ok(cls, output: str, exit_code: Optional[int] = 0) -> "ExecutionResult":
        """Build a successful result carrying captured stdout."""
        return cls(
            success=True, output=output, error_message=None, exit_code=exit_code
        )

    @classmethod
    def failure(
        cls, message: str, exit_code: Optional[int] = None
    ) -> "ExecutionResult":
        """Build a failed result carrying stderr or a description."""
        return cls(
            success=False, output="", error_message=message, exit_code=exit_code
        )

    def to_dict(self):
        """Convert to dictionary for JSON serialization."""
        return {
            "success": self.success,
            "output": self.output,
            "error_message": self.error_message,
            "exit_code": self.exit_code,
            "execution_time": self.execution_time,
        }


def _run_process(
    command: List[str], config: TranslatorConfig
) -> subprocess.CompletedProcess:
    """Run a command to completion with both streams captured."""
    logger.debug(f"Running: {command[0]} ({len(command) - 1} args)")
    return subprocess.run(
        command,
        capture_output=True,
        encoding="utf-8",
        errors="replace",
        timeout=config.execution.timeout,
    )


def _result_from(completed: subprocess.CompletedProcess) -> ExecutionResult:
    """Judge a finished process by its exit status alone."""
    if completed.returncode == 0:
        return ExecutionResult.ok(completed.stdout, exit_code=completed.returncode)
    return ExecutionResult.failure(completed.stderr, exit_code=completed.returncode)


@contextmanager
def _scratch_dir() -> Iterator[Path]:
    """Provide a temporary directory that is removed on exit."""
    with tempfile.TemporaryDirectory(prefix="translator-") as tmpdir:
        logger.info(f"Temp dir: {tmpdir}")
        yield Path(tmpdir)


def _execute_rust(code: str, config: TranslatorConfig) -> ExecutionResult:
    with _scratch_dir() as workdir:
        source = workdir / "main.rs"
        binary = workdir / "a.out"
        source.write_text(code, encoding="utf-8")

        compiled = _run_process(
            [config.toolchains.rustc, str(source), "-o", str(binary)], config
        )
        if compiled.returncode != 0:
            return _result_from(compiled)

        return _result_from(_run_process([str(binary)], config))


def _execute_java(code: str, config: TranslatorConfig) -> ExecutionResult:
    with _scratch_dir() as workdir:
        source = workdir / "Main.java"
        source.write_text(code, encoding="utf-8")

        compiled = _run_process([config.toolchains.javac, str(source)], config)
        if compiled.returncode != 0:
            return _result_from(compiled)

        return _result_from(
            _run_process([config.toolchains.java, "-cp", str(workdir), "Main"], config)
        )


def _execute_go(code: str, config: TranslatorConfig) -> ExecutionResult:
    with _scratch_dir() as workdir:
        source = workdir / "main.go"
        source.write_text(code, encoding="utf-8")

        return _result_from(
            _run_process([config.toolchains.go, "run", str(source)], config)
        )


def _execute_python(code: str, config: TranslatorConfig) -> ExecutionResult:
    return _result_from(_run_process([config.toolchains.python, "-c", code], config))


# Closed dispatch table keyed by exact language token
LANGUAGE_HANDLERS: Dict[str, Callable[[str, TranslatorConfig], ExecutionResult]] = {
    LANGUAGE_RUST: _execute_rust,
    LANGUAGE_JAVA: _execute_java,
    LANGUAGE_GO: _execute_go,
    LANGUAGE_PYTHON: _execute_python,
}


def supported_languages() -> List[str]:
    """Return the language tokens the dispatcher can execute."""
    return sorted(LANGUAGE_HANDLERS)


class ExecutionDispatcher:
    """Run code blocks through their language's toolchain.

    Per-block problems never raise: unsupported languages, non-zero exits,
    launch errors and timeouts all come back as failed ExecutionResults, so
    one bad block cannot stop the rest of a run.

    Example:
        dispatcher = ExecutionDispatcher()
        result = dispatcher.execute(CodeBlock(language="python", code="print(1)"))
        print(result.output)  # "1\\n"
    """

    def __init__(self, config: Optional[TranslatorConfig] = None):
        """Initialize dispatcher.

        Args:
            config: Toolchain and execution settings (defaults if None)
        """
        self.config = config or TranslatorConfig.create_default()

    def execute(self, block: CodeBlock) -> ExecutionResult:
        """Execute an extracted code block."""
        return self.execute_code(block.language, block.code)

    def execute_code(self, language: str, code: str) -> ExecutionResult:
        """Execute source code written in the given language.

        Args:
            language: Language token, matched exactly against the dispatch table
            code: Source text of the program

        Returns:
            ExecutionResult with stdout on success, or stderr / a description
            of the problem on failure
        """
        logger.info(f"Executing {language} code:\n{code}")

        handler = LANGUAGE_HANDLERS.get(language)
        if handler is None:
            return ExecutionResult.failure(f"Unsupported language: {language}")

        start_time = time.time()

        try:
            result = handler(code, self.config)
        except subprocess.TimeoutExpired as e:
            result = ExecutionResult.failure(
                f"{e.cmd[0]} timed out after {e.timeout} seconds"
            )
        except OSError as e:
            logger.debug(f"Failed to launch {language} toolchain: {e}")
            result = ExecutionResult.failure(str(e))

        result.execution_time = time.time() - start_time

        if not result.success:
            logger.debug(f"{language} block failed with exit code {result.exit_code}")

        return result
