"""
Pydantic models for view configuration.

Every view carries a ViewOptions instance. Root views take the module
defaults unless given explicit options; derived views inherit the
options of the view they were built from.
"""

import logging
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ViewOptions(BaseModel):
    """Behaviour switches shared by a family of views"""
    model_config = ConfigDict(frozen=True, extra="forbid")

    fail_fast: bool = Field(
        True,
        description="Raise ConcurrentModificationError when the backing sequence "
                    "changes size while a view is being iterated"
    )
    repr_limit: int = Field(
        10,
        description="Maximum number of elements shown by repr()",
        ge=0,
        le=1000
    )
    log_level: str = Field(
        "WARNING",
        description="Level used by setup_logging() for the lazy_views loggers",
        examples=["DEBUG", "INFO", "WARNING"]
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Validate the level is a standard logging level name"""
        level = str(v).strip().upper()
        valid_levels = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"]
        if level not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Valid levels: {valid_levels}")
        return level

    def numeric_log_level(self) -> int:
        return logging.getLevelName(self.log_level)


_default_options = ViewOptions()


def get_default_options() -> ViewOptions:
    """Options used by root views created without explicit options"""
    return _default_options


def set_default_options(**overrides: Any) -> ViewOptions:
    """Validate and install new module defaults; returns the new options"""
    global _default_options
    values: Dict[str, Any] = _default_options.model_dump()
    values.update(overrides)
    _default_options = ViewOptions(**values)
    return _default_options


def reset_default_options() -> ViewOptions:
    global _default_options
    _default_options = ViewOptions()
    return _default_options
