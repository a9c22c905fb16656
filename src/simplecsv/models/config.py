"""Parse/serialize configuration."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

QUOTE = '"'
CR = "\r"
LF = "\n"


class CsvConfig(BaseModel):
    """Options shared by the parser and the serializer.

    Older option dictionaries spelled the keys ``delim``, ``hasHeaders`` and
    ``hasComments``; those names are accepted as aliases.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    delimiter: str = Field(
        default=",", validation_alias=AliasChoices("delimiter", "delim")
    )
    has_headers: bool = Field(
        default=False, validation_alias=AliasChoices("has_headers", "hasHeaders")
    )
    has_comments: bool = Field(
        default=False,
        validation_alias=AliasChoices("has_comments", "hasComments"),
    )

    @field_validator("delimiter")
    @classmethod
    def _single_char_delimiter(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(
                f"delimiter must be a single character, got {value!r}"
            )
        if value in (QUOTE, CR, LF):
            raise ValueError(f"delimiter cannot be {value!r}")
        return value


__all__ = ["CR", "CsvConfig", "LF", "QUOTE"]
