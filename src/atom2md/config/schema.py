"""Configuration schema models using Pydantic."""

from typing import Literal

from pydantic import BaseModel, Field

CollisionPolicy = Literal["overwrite", "fail"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class ConvertConfig(BaseModel):
    """Defaults for a conversion run, usually loaded from a YAML file."""

    extra: str = ""  # Attached to every entry
    on_collision: CollisionPolicy = "overwrite"
    converter: str = "markdownify"
    workers: int = Field(default=1, ge=1)
    log_level: LogLevel = "INFO"
