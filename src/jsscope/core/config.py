"""Global configuration for jsscope.

This module provides centralized configuration management with support for
environment variables and sensible defaults.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class JsScopeConfig(BaseSettings):
    """jsscope configuration settings.

    Values can be overridden via environment variables with JSSCOPE_ prefix.
    Example: JSSCOPE_RUNTIME_TEMPLATE=runtime.php overrides runtime_template.
    """

    # Source reading
    source_encoding: str = Field(
        default="utf-8",
        description="Encoding used to read JavaScript sources from disk",
    )

    # Rename suffixes
    suffix_start: int = Field(
        default=0,
        ge=0,
        description="Counter value before the first catch rename suffix",
    )

    # Runtime assembly
    runtime_root: Path = Field(
        default=Path("."),
        description="Directory the runtime template path is relative to",
    )
    runtime_template: str = Field(
        default="tests.php",
        description="Runtime template file name",
    )
    runtime_marker: str = Field(
        default="//</BOILERPLATE>",
        description="Sentinel that ends the runtime section of the template",
    )
    runtime_encoding: str = Field(
        default="UTF-8",
        description="Encoding injected as the runtime's internal text encoding",
    )
    runtime_timezone: str | None = Field(
        default=None,
        description="Timezone abbreviation for LOCAL_TZ (defaults to the local clock)",
    )

    model_config = {
        "env_prefix": "JSSCOPE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def runtime_template_path(self) -> Path:
        return self.runtime_root / self.runtime_template


@lru_cache
def get_config() -> JsScopeConfig:
    """Get cached configuration instance.

    Returns:
        JsScopeConfig singleton instance.
    """
    return JsScopeConfig()


def reload_config() -> JsScopeConfig:
    """Reload configuration (clears cache).

    Returns:
        Fresh JsScopeConfig instance.
    """
    get_config.cache_clear()
    return get_config()
