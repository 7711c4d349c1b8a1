"""Configuration schema definitions using Pydantic for validation.

Loading options are few, but they are validated up front so that a bad
codec name fails at configuration time rather than halfway through a lex.
"""

import codecs
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from fdl.parsing.reader import DEFAULT_CHUNK_SIZE


class ReaderConfig(BaseModel):
    """Configuration for the byte reader.

    Attributes:
        chunk_size: Bytes pulled from the source per buffer refill.
    """

    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, ge=1, le=1_048_576)

    model_config = {"extra": "forbid", "frozen": True}


class DecodeConfig(BaseModel):
    """Configuration for turning token bytes into text.

    Attributes:
        encoding: Codec name passed to ``bytes.decode``.
        errors: Codec error handler ("replace", "strict", "ignore", ...).
    """

    encoding: str = "utf-8"
    errors: str = "replace"

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Validate that the codec is known to Python."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown encoding '{v}'") from None
        return v

    @field_validator("errors")
    @classmethod
    def validate_errors(cls, v: str) -> str:
        """Validate that the error handler is registered."""
        try:
            codecs.lookup_error(v)
        except LookupError:
            raise ValueError(f"Unknown codec error handler '{v}'") from None
        return v


class FDLConfig(BaseModel):
    """Top-level configuration for loading documents.

    Attributes:
        reader: Reader configuration.
        decode: Text decoding configuration.
    """

    reader: ReaderConfig = Field(default_factory=ReaderConfig)
    decode: DecodeConfig = Field(default_factory=DecodeConfig)

    model_config = {"extra": "forbid", "frozen": True}

    @classmethod
    def default(cls) -> "FDLConfig":
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FDLConfig":
        """Create configuration from dictionary.

        Raises:
            ValidationError: If configuration is invalid.
        """
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
