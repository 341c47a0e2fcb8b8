from typing import Optional

import pytz
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TableDefSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TABLEDEF_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__"
    )

    log_level: str = Field(
        default="INFO",
        description="Base log level passed to setup_logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    import_tool_name: str = Field(
        default="sqoop",
        min_length=1,
        description="Tool name written into the table comment, e.g. 'Imported by sqoop on ...'"
    )

    comment_time_zone: str = Field(
        default="UTC",
        description="Time zone used to render the creation timestamp in the table comment"
    )

    default_fs: Optional[str] = Field(
        default=None,
        description="Default filesystem URI (e.g. hdfs://namenode:8020) used to qualify load paths"
    )
    working_dir: str = Field(
        default="/",
        description="Working directory relative load paths are resolved against"
    )
    path_separator: str = Field(
        default="/",
        min_length=1,
        max_length=1,
        description="Separator appended to the warehouse directory when it lacks one"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("comment_time_zone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate that the timezone is valid."""
        try:
            pytz.timezone(v)
            return v
        except pytz.exceptions.UnknownTimeZoneError:
            raise ValueError(f"Unknown timezone: {v}. Use pytz timezone names like 'US/Central'")

    @field_validator("working_dir")
    @classmethod
    def validate_working_dir(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError(f"Working directory must be absolute: {v}")
        return v

    @property
    def timezone_info(self) -> pytz.BaseTzInfo:
        """Get the pytz timezone object for the comment timestamp."""
        return pytz.timezone(self.comment_time_zone)
