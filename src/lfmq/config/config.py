"""Where: src/lfmq/config/config.py
What: Load and persist the lfmq TOML configuration.
Why: One cached ``Config`` feeds settings, logging and the CLI.
"""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from lfmq.config.paths import default_config_path
from lfmq.platform.logging import logger

LASTFM_API_ROOT_DEFAULT: str = "https://ws.audioscrobbler.com/2.0/"
REQUEST_TIMEOUT_SECONDS_DEFAULT: float = 15.0

# Fields holding plain text; TOML numbers are accepted and stringified.
_TEXT_FIELDS: tuple[str, ...] = ("api_key", "api_root", "app_name", "app_version", "contact")


class ConfigError(Exception):
    """Configuration required to reach Last.fm is missing or invalid."""


def _path_field(default: Path | None = None) -> Any:
    """Create a dataclass field converted to ``Path`` in ``__post_init__``."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Last.fm API credentials and endpoint
    api_key: str | None = None
    api_root: str = LASTFM_API_ROOT_DEFAULT
    timeout_seconds: float = REQUEST_TIMEOUT_SECONDS_DEFAULT

    # Application identity used for the User-Agent header
    app_name: str | None = None
    app_version: str | None = None
    contact: str | None = None

    # Log file path
    log_file: Path | None = _path_field()

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Normalize TOML values: text fields to ``str``, path fields to ``Path``.

        Raises:
            ConfigError: A field holds a table, array or other non-scalar value.
        """
        for name in _TEXT_FIELDS:
            value = getattr(self, name)
            if value is None or isinstance(value, str):
                continue
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                setattr(self, name, str(value))
                continue
            raise ConfigError(
                f"Configuration value '{name}' must be a string, got {type(value).__name__}"
            )

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)
            elif value is not None and not isinstance(value, Path):
                raise ConfigError(f"Configuration value '{f.name}' must be a path string")

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to file.

        Args:
            target: Destination file. Defaults to the file this instance was
                loaded from, else ``default_config_path()``.

        Returns:
            Path: The file the configuration was written to.
        """
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        loaded_from = type(self)._loaded_from if type(self)._instance is self else None
        destination = target or loaded_from or default_config_path()
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            _ = destination.write_text(self._render_toml(config_dict), encoding="utf-8")
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", destination)
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# lfmq Configuration File")
        lines.append("")

        lines.append("# Last.fm API key (required for queries)")
        lines.append("# The LASTFM_API_KEY environment variable takes precedence")
        if config.get("api_key"):
            lines.append(f"api_key = {self._format_toml_value(config['api_key'])}")
        lines.append("")

        lines.append("# Last.fm API root and per-request timeout in seconds")
        lines.append(f"api_root = {self._format_toml_value(config['api_root'])}")
        lines.append(f"timeout_seconds = {self._format_toml_value(config['timeout_seconds'])}")
        lines.append("")

        lines.append("# Application identity sent in the User-Agent header (optional)")
        if config.get("app_name"):
            lines.append(f"app_name = {self._format_toml_value(config['app_name'])}")
        if config.get("app_version"):
            lines.append(f"app_version = {self._format_toml_value(config['app_version'])}")
        if config.get("contact"):
            lines.append(f"contact = {self._format_toml_value(config['contact'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/lfmq.log"')
        if config.get("log_file"):
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def source(cls) -> Path:
        """File the cached instance came from, else where it would be read from."""
        return cls._loaded_from or default_config_path()

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults; nothing is written on load.

        Args:
            config_file: Optional explicit file. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: The file cannot be read, is not valid TOML, or holds
                values of the wrong type.
        """
        if cls._instance is not None and config_file in (None, cls._loaded_from):
            return cls._instance

        source = config_file or default_config_path()

        if not source.exists():
            logger.debug("No configuration file at %s; using defaults", source)
            instance = cls()
        else:
            try:
                with open(source, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise ConfigError(f"Cannot read configuration {source}: {e}") from e

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

            try:
                instance = cls(**{k: v for k, v in config_dict.items() if k in known})
            except ConfigError as e:
                logger.error("Invalid configuration in %s: %s", source, e)
                raise ConfigError(f"{source}: {e}") from e
            logger.debug("Configuration loaded from %s", source)

        cls._instance = instance
        cls._loaded_from = source
        return instance


def _load_startup_config() -> Config:
    """Load at import without failing; the CLI reloads and reports errors."""
    try:
        return Config.load()
    except ConfigError as e:
        logger.warning("Using default configuration: %s", e)
        return Config()


# Global configuration instance
config = _load_startup_config()
