"""Configuration loading.

Settings are read from TOML, in this order of precedence:
1. An explicit file passed with ``--config`` (top-level keys, or a
   ``[tool.restdoc]`` table when the file is a pyproject.toml)
2. ``restdoc.toml`` in the working directory
3. ``[tool.restdoc]`` in ``pyproject.toml`` in the working directory

Command-line options override any value read here.
"""

import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

try:
    import tomli  # type: ignore[import]
except ImportError:
    # Fallback for newer Python versions
    try:
        import tomllib as tomli  # type: ignore[import]
    except ImportError as e:
        raise ImportError("toml library not available. Install with: pip install tomli") from e

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "restdoc.toml"
PYPROJECT_FILENAME = "pyproject.toml"


@dataclass
class DocConfig:
    """restdoc settings."""

    target: str | None = None  # "package.module:attribute" of the root command
    output_dir: str | None = None
    prog_name: str | None = None
    extension: str = ".txt"
    examples_dir: str | None = None
    prepend: str = ""  # template with {path} and {name} placeholders
    disable_autogen_tag: bool = False
    generator: str = "restdoc"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, excluding None values."""
        return {k: v for k, v in asdict(self).items() if v is not None}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DocConfig":
        """Create from dictionary.

        Raises:
            ConfigError: If a key is unknown or a value has the wrong type
        """
        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        config = cls(**data)
        if not isinstance(config.disable_autogen_tag, bool):
            raise ConfigError("disable_autogen_tag must be true or false")
        for key in ("target", "output_dir", "prog_name", "examples_dir"):
            value = getattr(config, key)
            if value is not None and not isinstance(value, str):
                raise ConfigError(f"{key} must be a string")
        for key in ("extension", "prepend", "generator"):
            if not isinstance(getattr(config, key), str):
                raise ConfigError(f"{key} must be a string")
        if config.extension and not config.extension.startswith("."):
            config.extension = "." + config.extension
        return config

    def merged(self, **overrides: Any) -> "DocConfig":
        """Return a copy with every non-None override applied."""
        data = asdict(self)
        data.update({k: v for k, v in overrides.items() if v is not None})
        return DocConfig(**data)

    def render_prepend(self, path: str) -> str:
        """Expand the prepend template for one output file."""
        if not self.prepend:
            return ""
        try:
            return self.prepend.format(path=path, name=Path(path).stem)
        except (KeyError, IndexError, ValueError) as e:
            raise ConfigError(f"Invalid prepend template: {e}") from e


def find_config_file(directory: Path | None = None) -> Path | None:
    """Locate the configuration file for ``directory`` (default: cwd)."""
    directory = directory or Path.cwd()
    candidate = directory / CONFIG_FILENAME
    if candidate.is_file():
        return candidate
    pyproject = directory / PYPROJECT_FILENAME
    if pyproject.is_file():
        return pyproject
    return None


def load_config(custom_path: str | Path | None = None) -> DocConfig:
    """Load configuration from file.

    Args:
        custom_path: Explicit config file path (optional)

    Returns:
        DocConfig object, defaults when no file is found

    Raises:
        ConfigError: If an explicit file is missing or any file fails to load
    """
    if custom_path is not None:
        path = Path(custom_path).expanduser()
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
    else:
        path = find_config_file()
        if path is None:
            logger.debug("No config file found, using defaults")
            return DocConfig()

    try:
        with open(path, "rb") as f:
            data = tomli.load(f)
    except (OSError, tomli.TOMLDecodeError) as e:
        raise ConfigError(f"Failed to load config {path}: {e}") from e

    if path.name == PYPROJECT_FILENAME:
        data = data.get("tool", {}).get("restdoc", {})

    logger.debug("Loaded config from: %s", path)
    return DocConfig.from_dict(data)


__all__ = ["CONFIG_FILENAME", "DocConfig", "find_config_file", "load_config"]
