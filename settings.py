"""
Runtime configuration for the RGBA fallback server.

Values come from init arguments, then RGBA_FALLBACK_* environment variables,
then a .env file. List values are given as JSON in the environment, e.g.
RGBA_FALLBACK_OLDIE='["background"]'.
"""

from functools import lru_cache
from typing import List, Union

import pydantic as pc
import pydantic_settings as ps

from color_fallback.options import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_PROPERTIES,
    ResolvedOptions,
    resolve_legacy_properties,
    validate_background,
)


class Settings(ps.BaseSettings):
    model_config = ps.SettingsConfigDict(
        env_prefix="RGBA_FALLBACK_",
        env_file=".env",
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = 8973
    log_level: str = pc.Field(default="INFO", description="Root logging level")

    properties: List[str] = pc.Field(
        default_factory=lambda: list(DEFAULT_PROPERTIES),
        description="Properties eligible for a fallback",
    )
    background_color: str = pc.Field(
        default=DEFAULT_BACKGROUND_COLOR,
        description="Background used for compositing",
    )
    oldie: Union[bool, List[str]] = pc.Field(
        default=False,
        description="Emit legacy filters: true, or a list of eligible properties",
    )

    @pc.field_validator("background_color")
    @classmethod
    def _check_background(cls, v: str) -> str:
        return validate_background(v)

    @pc.field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper()

    def resolve(self) -> ResolvedOptions:
        """Normalize the fallback options once."""
        return ResolvedOptions(
            properties=frozenset(self.properties),
            background_color=self.background_color,
            legacy_properties=resolve_legacy_properties(self.oldie),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def get_options() -> ResolvedOptions:
    return get_settings().resolve()
