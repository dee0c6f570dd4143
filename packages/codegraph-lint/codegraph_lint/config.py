"""
Linter Settings

Environment variables use the CODEGRAPH_LINT_ prefix.
Example: CODEGRAPH_LINT_LOG_LEVEL=DEBUG, CODEGRAPH_LINT_STRUCTURED_LOGS=true
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_EXTENSIONS = (".js", ".jsx", ".mjs", ".cjs", ".ts", ".tsx")


class LintSettings(BaseSettings):
    """codegraph-lint runtime settings."""

    model_config = SettingsConfigDict(
        env_prefix="CODEGRAPH_LINT_",
        extra="ignore",  # 알 수 없는 환경 변수 무시
    )

    log_level: str = Field("WARNING", description="Logging level for the codegraph_lint logger")
    structured_logs: bool = Field(False, description="Emit logs as JSON lines")

    # Files above this size are skipped by the CLI (0 disables the limit)
    max_file_size_kb: int = Field(1024, ge=0)

    extensions: tuple[str, ...] = Field(
        DEFAULT_EXTENSIONS,
        description="File extensions collected when a directory is linted",
    )


@lru_cache(maxsize=1)
def get_settings() -> LintSettings:
    """Get cached settings instance"""
    return LintSettings()
