"""Configuration schema and loading for Block Translator."""

import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Optional, Union

import yaml

from translator.constants import (
    DEFAULT_GO,
    DEFAULT_JAVA,
    DEFAULT_JAVAC,
    DEFAULT_PYTHON,
    DEFAULT_RUSTC,
)

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read or parsed."""


@dataclass
class ToolchainConfig:
    """Executables invoked for each supported language."""

    rustc: str = DEFAULT_RUSTC
    javac: str = DEFAULT_JAVAC
    java: str = DEFAULT_JAVA
    go: str = DEFAULT_GO
    python: str = DEFAULT_PYTHON

    def __post_init__(self):
        """Validate configuration values."""
        for f in fields(self):
            value = getattr(self, f.name)
            if not value or not isinstance(value, str):
                raise ValueError(
                    f"{f.name} must be a non-empty string, got {value!r}"
                )


@dataclass
class ExecutionConfig:
    """Subprocess execution settings."""

    # Seconds to wait for each compile/run step; None waits indefinitely
    timeout: Optional[float] = None

    def __post_init__(self):
        """Validate configuration values."""
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")


@dataclass
class TranslatorConfig:
    """Main configuration for Block Translator."""

    toolchains: ToolchainConfig = field(default_factory=ToolchainConfig)
    execution: ExecutionConfig = field(default_factory=ExecutionConfig)

    def to_dict(self) -> dict:
        """Convert config to dictionary for YAML serialization."""
        return {
            "toolchains": asdict(self.toolchains),
            "execution": asdict(self.execution),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TranslatorConfig":
        """Create config from dictionary (loaded from YAML)."""

        def _filter(cls_, data_):
            """Filter dict to only include known dataclass fields."""
            known = {f.name for f in fields(cls_)}
            return {k: v for k, v in (data_ or {}).items() if k in known}

        return cls(
            toolchains=ToolchainConfig(
                **_filter(ToolchainConfig, data.get("toolchains"))
            ),
            execution=ExecutionConfig(
                **_filter(ExecutionConfig, data.get("execution"))
            ),
        )

    @classmethod
    def create_default(cls) -> "TranslatorConfig":
        """Create default configuration."""
        return cls(toolchains=ToolchainConfig(), execution=ExecutionConfig())


def load_config(path: Union[str, Path]) -> TranslatorConfig:
    """Load configuration from a YAML file.

    Missing sections and keys fall back to defaults; unknown keys are ignored.

    Args:
        path: Path to the YAML file

    Returns:
        TranslatorConfig built from the file

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML, or holds
            invalid values
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Error loading config {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(
            f"Config {path} must contain a mapping, got {type(data).__name__}"
        )

    try:
        config = TranslatorConfig.from_dict(data)
    except (AttributeError, TypeError, ValueError) as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e

    logger.debug(f"Loaded config from {path}")
    return config


def save_config(config: TranslatorConfig, path: Union[str, Path]):
    """Save configuration to a YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config.to_dict(), f, default_flow_style=False)
