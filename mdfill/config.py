"""
Runtime settings for mdfill.

Values come from, in increasing priority:
- the defaults on FillerSettings
- MDFILL_* environment variables (a .env file is loaded first)
- explicit overrides, typically the command line flags
"""

import os
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

from .outline.constants import DEFAULT_BULLET

ENV_PREFIX = "MDFILL_"
_TRUE_VALUES = {"1", "true", "yes", "on"}


class FillerSettings(BaseModel):
    """Settings shared by the outline extractor and the placeholder filler."""
    bullet: str = Field(default=DEFAULT_BULLET, description="Glyph replacing '-' / '+' list markers")
    placeholder_open: str = Field(default="{", description="Opening delimiter of template markers")
    placeholder_close: str = Field(default="}", description="Closing delimiter of template markers")
    emphasis_styles: bool = Field(default=True, description="Render **bold** / *italic* spans as run styles")
    strict: bool = Field(default=False, description="Fail on malformed definition entries")
    verbose: bool = Field(default=False, description="Emit debug trace of the extraction")

    @field_validator("bullet", "placeholder_open", "placeholder_close")
    @classmethod
    def not_empty(cls, v):
        """Delimiters and the bullet must contain at least one character."""
        if not v:
            raise ValueError("must not be empty")
        return v


def _env_value(name: str, as_bool: bool) -> Optional[Any]:
    raw = os.getenv(ENV_PREFIX + name.upper())
    if raw is None:
        return None
    if as_bool:
        return raw.strip().lower() in _TRUE_VALUES
    return raw


def load_settings(**overrides: Any) -> FillerSettings:
    """
    Builds FillerSettings from the environment and explicit overrides.

    Overrides set to None are ignored so that unset CLI flags fall back to
    the environment.
    """
    load_dotenv(find_dotenv(usecwd=True))  # Load environment variables from .env file
    values: Dict[str, Any] = {}
    for name, model_field in FillerSettings.model_fields.items():
        value = _env_value(name, as_bool=model_field.annotation is bool)
        if value is not None:
            values[name] = value
    values.update({name: value for name, value in overrides.items() if value is not None})
    return FillerSettings(**values)
