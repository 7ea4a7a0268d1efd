import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from noogle.core.exceptions import ConfigLoadError

CONFIG_FILENAME = ".noogle.toml"
DEFAULT_SOURCE_BASE_URL = "https://github.com/hsjobeki/nixpkgs/tree/migrate-doc-comments"


def _deep_merge(destination: dict[str, Any], source: dict[str, Any]) -> dict[str, Any]:
    """Merge source into destination, with source values overwriting."""
    for key, value in source.items():
        if isinstance(value, Mapping) and key in destination and isinstance(destination[key], Mapping):
            destination[key] = _deep_merge(dict(destination[key]), dict(value))
        else:
            destination[key] = value
    return destination


class SourceSettings(BaseModel):
    """Where "Edit source" links point to."""

    base_url: str = Field(default=DEFAULT_SOURCE_BASE_URL, description="Browsable root of the source tree")
    strip_components: int = Field(
        default=4,
        ge=0,
        description="Leading path segments dropped from recorded file positions",
    )
    repo_root: str | None = Field(
        default=None,
        description="Checkout prefix removed from recorded file positions; overrides strip_components",
    )


class PathsSettings(BaseModel):
    """Path configuration.

    All paths are relative to the 'site_root' unless absolute.
    """

    site_root: Path = Field(default_factory=Path.cwd, description="Root directory of the site")
    data_file: Path = Field(default=Path("data.json"), description="Documentation corpus (JSON)")
    output_dir: Path = Field(default=Path("dist"), description="Rendered site directory")

    @property
    def abs_data_file(self) -> Path:
        return self._resolve(self.data_file)

    @property
    def abs_output_dir(self) -> Path:
        return self._resolve(self.output_dir)

    def _resolve(self, path: Path) -> Path:
        if path.is_absolute():
            return path
        return self.site_root / path


class SiteSettings(BaseModel):
    title: str = Field(default="Noogle", description="Site title used in the page shell")
    route_prefix: str = Field(default="/f", pattern="^/[^/]", description="URL prefix of entry pages")
    theme: str = Field(default="light", pattern="^(light|dark)$")


class NoogleConfig(BaseSettings):
    """Root configuration.

    Supports environment variable overrides with the pattern:
    NOOGLE_SECTION__KEY (e.g., NOOGLE_SOURCE__BASE_URL)
    """

    source: SourceSettings = Field(default_factory=SourceSettings)
    paths: PathsSettings = Field(default_factory=PathsSettings)
    site: SiteSettings = Field(default_factory=SiteSettings)

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="NOOGLE_",
        env_nested_delimiter="__",
    )

    @classmethod
    def load(cls, site_root: Path | None = None) -> "NoogleConfig":
        """Loads configuration from .noogle.toml and environment variables.

        Priority (highest to lowest):
        1. Environment variables (NOOGLE_SECTION__KEY)
        2. Config file (.noogle.toml)
        3. Defaults
        """
        root_path = site_root if site_root is not None else Path.cwd()
        config_file = root_path / CONFIG_FILENAME

        file_settings: dict[str, Any] = {}
        if config_file.is_file():
            try:
                with config_file.open("rb") as f:
                    file_settings = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                raise ConfigLoadError(str(config_file), str(e)) from e

        env_settings = cls().model_dump(exclude_unset=True)

        merged_config = _deep_merge(file_settings, env_settings)
        merged_config.setdefault("paths", {})["site_root"] = root_path

        try:
            return cls.model_validate(merged_config)
        except ValidationError as e:
            raise ConfigLoadError(str(config_file), str(e)) from e
