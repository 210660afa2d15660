"""
UsernameConfig model holding the rule set for username validation.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class LengthMode(str, Enum):
    """How the effective length of a username is measured."""

    # One per codepoint.
    CODEPOINTS = "codepoints"
    # Han characters count 2, since they render about twice as wide as Latin ones.
    DISPLAY_WIDTH = "display_width"


class UsernameConfig(BaseModel):
    """
    Immutable username rule set.

    Usernames always allow Unicode letters of any script and ASCII digits;
    the three separator characters can be switched off individually.

    Attributes:
        min_length: Minimum effective length (inclusive)
        max_length: Maximum effective length (inclusive)
        allow_dot: Whether "." may appear
        allow_hyphen: Whether "-" may appear
        allow_underscore: Whether "_" may appear
        length_mode: Codepoint count or Han-aware display width
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "min_length": 6,
                "max_length": 64,
                "allow_dot": True,
                "allow_hyphen": True,
                "allow_underscore": True,
                "length_mode": "codepoints",
            }
        },
    )

    min_length: int = Field(6, ge=0)
    max_length: int = Field(64, ge=0)
    allow_dot: bool = True
    allow_hyphen: bool = True
    allow_underscore: bool = True
    length_mode: LengthMode = LengthMode.CODEPOINTS

    @model_validator(mode="after")
    def check_length_bounds(self):
        """Validate that max_length is not below min_length, defaults included."""
        if self.max_length < self.min_length:
            raise ValueError(
                f"max_length ({self.max_length}) must not be less than min_length ({self.min_length})"
            )
        return self

    @property
    def allowed_separators(self) -> frozenset[str]:
        separators = set()
        if self.allow_dot:
            separators.add(".")
        if self.allow_hyphen:
            separators.add("-")
        if self.allow_underscore:
            separators.add("_")
        return frozenset(separators)
