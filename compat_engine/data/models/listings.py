"""
Listing data models.

``ListingData`` is the common marker: an open record with an id and a
``category`` discriminant. Each category subclasses it with just the fields
its scorer reads. Upstream listing payloads are loosely shaped, so
``parse_listing`` validates leniently: a malformed field is logged and dropped
(it then scores as absent) instead of failing the whole request.
"""

from collections.abc import Mapping
from typing import Any, Optional, TypeVar

from pydantic import AliasChoices, BaseModel, Field, ValidationError, field_validator

from compat_engine.utils.logger import get_logger

from .base import NumericRange, OpenRecord

logger = get_logger(__name__)


class ListingData(OpenRecord):
    """Fields shared by every listing, whatever its category."""

    id: str = ""
    category: Optional[str] = None
    subcategory: Optional[str] = None
    title: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        """Numeric ids are accepted and stored as strings."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class JobListing(ListingData):
    """Job posting."""

    required_skills: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("requiredSkills", "required_skills", "skills"),
    )
    salary: Optional[float | NumericRange] = None
    work_arrangement: Optional[str] = None
    experience_level: Optional[str] = None
    location: Optional[str] = None

    @property
    def salary_value(self) -> Optional[float]:
        """Single salary figure; ranges are reduced to their midpoint."""
        if isinstance(self.salary, NumericRange):
            return self.salary.midpoint
        return self.salary


class ServiceListing(ListingData):
    """Service offered by a provider."""

    service_type: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("serviceType", "service_type", "type"),
    )
    price: Optional[float] = None
    provider_rating: Optional[float] = None
    distance: Optional[float] = None


class RentalListing(ListingData):
    """Rental property or item."""

    rental_type: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("rentalType", "rental_type", "type"),
    )
    price: Optional[float] = None
    location: Optional[str] = None
    amenities: list[str] = Field(default_factory=list)
    duration: Optional[float] = None  # months


class MarketplaceListing(ListingData):
    """Item for sale."""

    item_type: Optional[str] = None
    price: Optional[float] = None
    condition: Optional[str] = None
    distance: Optional[float] = None
    brand: Optional[str] = None


class FavorListing(ListingData):
    """Request for a favor."""

    favor_type: Optional[str] = None
    compensation: Optional[Any] = None
    compensation_type: Optional[str] = None
    compensation_amount: Optional[float] = None
    estimated_time: Optional[float] = None  # hours
    distance: Optional[float] = None
    reciprocity: Optional[str] = None


class HolidayListing(ListingData):
    """Holiday or travel offer."""

    destination: Optional[str] = None
    activities: list[str] = Field(default_factory=list)
    price: Optional[float] = None
    duration: Optional[float] = None  # days
    season: Optional[str] = None


class ArtListing(ListingData):
    """Artwork or art commission."""

    medium: Optional[str] = None
    style: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("style", "styles"),
    )
    price: Optional[float] = None
    artist: Optional[str] = None
    format: Optional[str] = None

    @field_validator("style", mode="before")
    @classmethod
    def wrap_single_style(cls, v: Any) -> Any:
        """A single style string is treated as a one-element list."""
        if isinstance(v, str):
            return [v]
        return v


class GiveawayListing(ListingData):
    """Free item or service."""

    item_type: Optional[str] = None
    condition: Optional[str] = None
    distance: Optional[float] = None


class LearningListing(ListingData):
    """Course, lesson, or other learning offer."""

    subject: Optional[str] = None
    format: Optional[str] = None
    level: Optional[str] = None
    price: Optional[float] = None
    duration_weeks: Optional[float] = None


class CommunityListing(ListingData):
    """Community event, group, or activity."""

    activity_type: Optional[str] = None
    distance: Optional[float] = None
    group_size: Optional[float] = None
    age_group: Optional[str] = None
    frequency: Optional[str] = None


ListingT = TypeVar("ListingT", bound=ListingData)


def _input_keys(model_cls: type[BaseModel], key: str) -> set[str]:
    """All input keys (name and aliases) of the field that ``key`` refers to."""
    for name, info in model_cls.model_fields.items():
        keys = {name}
        if info.alias:
            keys.add(info.alias)
        if isinstance(info.validation_alias, str):
            keys.add(info.validation_alias)
        elif isinstance(info.validation_alias, AliasChoices):
            keys.update(c for c in info.validation_alias.choices if isinstance(c, str))
        if key in keys:
            return keys
    return {key}


def parse_listing(model_cls: type[ListingT], data: Any) -> ListingT:
    """
    Build a typed listing from a raw payload without ever raising.

    Args:
        model_cls: Listing model to build
        data: Raw mapping, another ListingData instance, or an instance of model_cls

    Returns:
        The typed listing; malformed fields are dropped
    """
    if isinstance(data, model_cls):
        return data

    if isinstance(data, BaseModel):
        data = data.model_dump()
    elif not isinstance(data, Mapping):
        logger.warning(f"Expected a mapping for {model_cls.__name__}, got {type(data).__name__}")
        data = {}

    payload = dict(data)
    for _ in range(len(model_cls.model_fields) + 1):
        try:
            return model_cls.model_validate(payload)
        except ValidationError as e:
            bad_fields = {str(err["loc"][0]) for err in e.errors() if err["loc"]}
            dropped = set()
            for field_key in bad_fields:
                dropped.update(k for k in _input_keys(model_cls, field_key) if k in payload)
            if not dropped:
                break
            logger.warning(
                f"Dropping malformed {model_cls.__name__} fields "
                f"(listing {payload.get('id', '?')}): {sorted(dropped)}"
            )
            for key in dropped:
                payload.pop(key)

    return model_cls()
