"""Pydantic configuration models for pathutil."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings


class NormalizationConfig(BaseModel):
    """Path normalization defaults."""

    separator: str = Field(default="/", min_length=1, max_length=1)
    forbidden_characters: str = ""
    replacement: str = Field(default="-", min_length=1, max_length=1)

    @model_validator(mode="after")
    def validate_characters(self) -> "NormalizationConfig":
        """Keep the separator and replacement out of each other's way."""
        if self.replacement == self.separator:
            raise ValueError("replacement must differ from separator")
        if self.separator in self.forbidden_characters:
            raise ValueError("separator cannot be a forbidden character")
        if self.replacement in self.forbidden_characters:
            raise ValueError("replacement cannot be a forbidden character")
        return self


class SearchConfig(BaseModel):
    """Search path configuration."""

    path_variable: str = Field(default="PATH", min_length=1)
    delimiter: str = Field(default=":", min_length=1, max_length=1)


class FilesystemConfig(BaseModel):
    """Filesystem operation configuration."""

    directory_mode: int = Field(default=0o755, ge=0, le=0o7777)
    remove_retries: int = Field(default=0, ge=0, le=5)

    @field_validator("directory_mode", mode="before")
    @classmethod
    def parse_octal(cls, v: int | str) -> int:
        """Accept octal strings such as "0755"."""
        if isinstance(v, str):
            return int(v, 8)
        return v


class LoggingConfig(BaseModel):
    """Logging configuration for loguru."""

    level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: Literal["console", "json"] = "console"
    file: Path | None = None
    rotation: str = "10 MB"
    retention: str = "7 days"


class Config(BaseSettings):
    """Root configuration for pathutil."""

    normalization: NormalizationConfig = Field(default_factory=NormalizationConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    filesystem: FilesystemConfig = Field(default_factory=FilesystemConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "PATHUTIL_",
        "env_nested_delimiter": "__",
    }
