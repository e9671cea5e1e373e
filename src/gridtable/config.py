"""Configuration model for GridTable."""

from pathlib import Path

from pydantic import BaseModel, Field

from .core.constants import ENV_PREFIX, LOGGING_DEFAULTS, TABLE_DEFAULTS


def _env_flag(value: str | None, default: bool) -> bool:
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config(BaseModel):
    """Configuration for GridTable."""

    # Table reading defaults
    header: bool = Field(
        TABLE_DEFAULTS.HEADER, description="Whether the first table row holds column labels"
    )
    stop_on_empty_row: bool = Field(
        TABLE_DEFAULTS.STOP_ON_EMPTY_ROW,
        description="Whether a blank or skipped row ends the table",
    )
    infer_eltypes: bool = Field(
        TABLE_DEFAULTS.INFER_ELTYPES, description="Infer an element type for each column"
    )
    first_row: int = Field(
        TABLE_DEFAULTS.FIRST_ROW, ge=1, description="First row scanned by table auto-detection"
    )

    # Logging
    log_level: str = Field(LOGGING_DEFAULTS.LEVEL, description="Logging level")
    log_file: Path | None = Field(None, description="Log file path")

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables.

        A ``.env`` file in the working directory or one of its parents is loaded
        first (it won't override variables that are already set). Variables use
        the ``GRIDTABLE_`` prefix, e.g. ``GRIDTABLE_STOP_ON_EMPTY_ROW=false``.
        """
        import os

        from dotenv import find_dotenv, load_dotenv

        load_dotenv(find_dotenv(usecwd=True))

        def env(name: str) -> str | None:
            return os.getenv(f"{ENV_PREFIX}{name}")

        log_file = env("LOG_FILE")
        return cls(
            header=_env_flag(env("HEADER"), TABLE_DEFAULTS.HEADER),
            stop_on_empty_row=_env_flag(
                env("STOP_ON_EMPTY_ROW"), TABLE_DEFAULTS.STOP_ON_EMPTY_ROW
            ),
            infer_eltypes=_env_flag(env("INFER_ELTYPES"), TABLE_DEFAULTS.INFER_ELTYPES),
            first_row=int(env("FIRST_ROW") or TABLE_DEFAULTS.FIRST_ROW),
            log_level=env("LOG_LEVEL") or LOGGING_DEFAULTS.LEVEL,
            log_file=Path(log_file) if log_file else None,
        )


# Type alias kept for callers that prefer the longer name
GridTableConfig = Config
