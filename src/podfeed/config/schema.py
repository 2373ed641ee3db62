"""Configuration schema models using Pydantic."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class GlobalConfig(BaseModel):
    """Global podfeed configuration."""

    version: str = "1"
    log_level: LogLevel = "INFO"
    default_output: Path | None = None  # stdout when unset

    # Output formatting
    indent: int = Field(default=2, ge=0)
    xml_declaration: bool = False
