"""Configuration utilities for palette studio."""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

try:
    import tomllib as tomli  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover - older runtimes ship the tomli backport
    import tomli  # type: ignore[no-redef]
from pydantic import BaseModel, ValidationError, field_validator
from tomli_w import dump as toml_dump

from .exceptions import ConfigurationError
from .models import HarmonyKind
from .utils import HEX_COLOR_PATTERN

CONFIG_DIR = Path.home() / ".config" / "palette_studio"
CONFIG_FILE = CONFIG_DIR / "config.toml"
CONFIG_VERSION = "1.0.0"
CONFIG_ENV_VAR = "PALETTE_STUDIO_CONFIG"

logger = logging.getLogger(__name__)


def config_path() -> Path:
    """Return the config file path, honouring the override environment variable."""
    override = os.getenv(CONFIG_ENV_VAR, "").strip()
    return Path(override).expanduser() if override else CONFIG_FILE


def _check_hex(value: str, field_name: str) -> str:
    if not HEX_COLOR_PATTERN.fullmatch(value):
        raise ValueError(f"{field_name} must be a hex color like #3b82f6, got: {value}")
    return value.lower()


class DefaultsConfig(BaseModel):
    """Default values used when a command gets no explicit color."""

    brand_color: str = "#3b82f6"
    neutral_color: str = ""
    harmony: str = HarmonyKind.COMPLEMENTARY.value
    random_count: int = 5

    @field_validator("brand_color")
    @classmethod
    def validate_brand_color(cls, v: str) -> str:
        """Validate the brand color format."""
        return _check_hex(v, "brand_color")

    @field_validator("neutral_color")
    @classmethod
    def validate_neutral_color(cls, v: str) -> str:
        """Validate the neutral color format if provided."""
        return _check_hex(v, "neutral_color") if v else v

    @field_validator("harmony")
    @classmethod
    def validate_harmony(cls, v: str) -> str:
        """Validate that the harmony is a known kind."""
        return HarmonyKind.parse(v).value

    @field_validator("random_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate that random_count is positive."""
        if v <= 0:
            raise ValueError(f"random_count must be positive, got {v}")
        return v


class ExportConfig(BaseModel):
    """Configuration for written artefacts."""

    output_dir: str = "palettes"
    json_filename: str = "color-palette.json"
    html_filename: str = "palette-preview.html"
    indent: int = 2

    @field_validator("json_filename", "html_filename")
    @classmethod
    def validate_filename(cls, v: str, info) -> str:
        """Validate that file names are plain names, not paths."""
        if not v or "/" in v or "\\" in v or v in (".", ".."):
            raise ValueError(f"{info.field_name} must be a plain file name, got: {v!r}")
        return v

    @field_validator("indent")
    @classmethod
    def validate_indent(cls, v: int) -> int:
        """Validate that JSON indentation is not negative."""
        if v < 0:
            raise ValueError(f"indent must not be negative, got {v}")
        return v


class PreviewConfig(BaseModel):
    """Configuration for the HTML preview."""

    chart_width: int = 300
    chart_height: int = 150
    swatch_size: int = 48

    @field_validator("chart_width", "chart_height", "swatch_size")
    @classmethod
    def validate_positive(cls, v: int, info) -> int:
        """Validate that dimensions are positive."""
        if v <= 0:
            raise ValueError(f"{info.field_name} must be positive, got {v}")
        return v


@dataclass(slots=True)
class Config:
    """Top-level configuration container."""

    version: str = CONFIG_VERSION
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    preview: PreviewConfig = field(default_factory=PreviewConfig)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Load configuration data from disk.

        Args:
            path: Optional override for the configuration file path.

        Returns:
            Config: The loaded configuration, or defaults if the file is absent.

        Raises:
            ConfigurationError: If configuration file is corrupted or invalid.
        """

        path = path or config_path()
        if not path.exists():
            return cls()

        try:
            with path.open("rb") as handle:
                raw: Dict[str, Any] = tomli.load(handle)
        except (OSError, tomli.TOMLDecodeError) as exc:
            raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

        version = raw.get("version", CONFIG_VERSION)
        if version != CONFIG_VERSION:
            logger.warning("Configuration version %s differs from %s", version, CONFIG_VERSION)

        try:
            defaults = DefaultsConfig(**raw.get("defaults", {}))
            export = ExportConfig(**raw.get("export", {}))
            preview = PreviewConfig(**raw.get("preview", {}))
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid configuration: {exc}") from exc

        return cls(version=version, defaults=defaults, export=export, preview=preview)

    def dump(self, path: Optional[Path] = None, backup: bool = True) -> None:
        """Persist the configuration to disk.

        Args:
            path: Path to save the configuration file.
            backup: If True and config file exists, create a backup before overwriting.
        """

        path = path or config_path()
        path.parent.mkdir(parents=True, exist_ok=True)

        if backup and path.exists():
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            backup_path = path.parent / f"{path.stem}.{timestamp}.bak"
            shutil.copy2(path, backup_path)
            logger.debug("Backed up configuration to %s", backup_path)

        with path.open("wb") as handle:
            toml_dump(self._payload(), handle)

    def _payload(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "defaults": self.defaults.model_dump(),
            "export": self.export.model_dump(),
            "preview": self.preview.model_dump(),
        }

    def to_display_dict(self) -> Dict[str, Any]:
        """Return a serialisable representation for display purposes."""

        payload = self._payload()
        payload.pop("version")
        return payload

    def _sections(self) -> Dict[str, BaseModel]:
        return {
            "defaults": self.defaults,
            "export": self.export,
            "preview": self.preview,
        }

    def _resolve(self, key: str) -> tuple[BaseModel, str, str]:
        parts = key.split(".")
        if len(parts) != 2:
            raise ConfigurationError(f"Invalid key format '{key}'. Expected format: section.field")

        section, field_name = parts
        sections = self._sections()
        if section not in sections:
            valid_sections = ", ".join(sections.keys())
            raise ConfigurationError(f"Invalid section '{section}'. Valid sections: {valid_sections}")

        config_obj = sections[section]
        if field_name not in type(config_obj).model_fields:
            valid_fields = ", ".join(type(config_obj).model_fields.keys())
            raise ConfigurationError(
                f"Invalid field '{field_name}' for section '{section}'. Valid fields: {valid_fields}"
            )
        return config_obj, section, field_name

    def set_value(self, key: str, value: str) -> None:
        """Set a configuration value using dot notation.

        Args:
            key: Configuration key in dot notation (e.g., 'defaults.brand_color')
            value: Value to set (will be converted to the field's type)

        Raises:
            ConfigurationError: If key is invalid or value fails validation
        """
        config_obj, section, field_name = self._resolve(key)
        field_type = type(config_obj).model_fields[field_name].annotation

        try:
            if field_type in (int, "int"):
                converted_value: Any = int(value)
            elif field_type in (bool, "bool"):
                converted_value = value.lower() in ("true", "1", "yes", "on")
            else:
                converted_value = value
        except ValueError as exc:
            raise ConfigurationError(f"Cannot convert '{value}' to {field_type} for {key}") from exc

        current_data = config_obj.model_dump()
        current_data[field_name] = converted_value
        try:
            validated_model = type(config_obj).model_validate(current_data)
        except ValidationError as exc:
            error_msg = "; ".join(
                f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}" for e in exc.errors()
            )
            raise ConfigurationError(f"Validation error for {key}: {error_msg}") from exc

        setattr(self, section, validated_model)

    def get_value(self, key: str) -> Any:
        """Get a configuration value using dot notation.

        Raises:
            ConfigurationError: If key is invalid
        """
        config_obj, _, field_name = self._resolve(key)
        return getattr(config_obj, field_name)
