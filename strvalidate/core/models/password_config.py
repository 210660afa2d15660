"""
PasswordConfig model holding the rule set for password validation.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PasswordConfig(BaseModel):
    """
    Immutable password rule set.

    Lengths count Unicode codepoints: the length of "Hello, 世界" is 9.
    Every presence requirement is off by default; callers opt in.

    Attributes:
        min_length: Minimum number of codepoints (inclusive)
        max_length: Maximum number of codepoints (inclusive)
        require_digit: At least one decimal digit
        require_upper: At least one upper-case letter
        require_lower: At least one lower-case letter
        require_special: At least one symbol or punctuation character
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "min_length": 9,
                "max_length": 64,
                "require_digit": True,
                "require_upper": True,
                "require_lower": True,
                "require_special": True,
            }
        },
    )

    min_length: int = Field(8, ge=0)
    max_length: int = Field(64, ge=0)
    require_digit: bool = False
    require_upper: bool = False
    require_lower: bool = False
    require_special: bool = False

    @model_validator(mode="after")
    def check_length_bounds(self):
        """Validate that max_length is not below min_length, defaults included."""
        if self.max_length < self.min_length:
            raise ValueError(
                f"max_length ({self.max_length}) must not be less than min_length ({self.min_length})"
            )
        return self
