"""
Base model classes for compatibility engine data models.

Provides the shared configuration for all records: snake_case attributes in
Python, camelCase names on the JSON side.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class EmbeddedModel(BaseModel):
    """
    Base model for plain data records.

    Accepts both the Python field name and its camelCase alias on input and
    dumps camelCase with ``by_alias=True``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_json_dict(self) -> dict[str, Any]:
        """Dump to a JSON-compatible dictionary using camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class OpenRecord(EmbeddedModel):
    """
    Record that keeps keys it does not declare.

    Preference and listing payloads are open bags of fields; unknown keys are
    preserved so custom scorers can read them.
    """

    model_config = ConfigDict(extra="allow")

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        """Treat explicit nulls as absent so field defaults apply."""
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def get_extra(self, key: str, default: Any = None) -> Any:
        """Read an undeclared field by its original key."""
        return (self.model_extra or {}).get(key, default)


class NumericRange(EmbeddedModel):
    """Inclusive numeric range; either bound may be missing."""

    min: Optional[float] = None
    max: Optional[float] = None

    @property
    def midpoint(self) -> Optional[float]:
        """Middle of the range, or the single known bound."""
        if self.min is not None and self.max is not None:
            return (self.min + self.max) / 2
        return self.min if self.min is not None else self.max

