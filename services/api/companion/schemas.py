"""
Typed inputs and outputs for the companion operations.

Inputs are validated at the API boundary; the operations receive them
already typed. Partial-update models are consumed with
``model_dump(exclude_unset=True)``: a field left out of the request is not
in ``model_fields_set`` and stays untouched, while an explicit ``null`` is a
write of NULL. Columns that cannot hold NULL reject an explicit ``null``.
"""

from datetime import datetime, timezone
from typing import Annotated, Literal, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, EmailStr, Field, field_validator

TravelMode = Literal["flight", "boat", "taxi", "bus", "train"]
DocumentType = Literal["passport", "visa", "id", "ticket", "other"]

_NOT_NULL_MESSAGE = "may be omitted but cannot be null"


def _as_utc(value: datetime) -> datetime:
    """Naive values are taken as UTC; aware values are converted to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# Stored and returned in UTC on every backend, so ordering follows the instant.
UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class CreateUserInput(BaseModel):
    email: EmailStr
    name: Optional[str] = None
    image: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    interests: list[str] = Field(default_factory=list)
    is_discoverable: bool = False


class UpdateUserInput(BaseModel):
    name: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    interests: Optional[list[str]] = None
    is_discoverable: Optional[bool] = None

    @field_validator("interests", "is_discoverable")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError(_NOT_NULL_MESSAGE)
        return v


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    name: Optional[str]
    image: Optional[str]
    bio: Optional[str]
    location: Optional[str]
    interests: list[str]
    is_discoverable: bool
    created_at: UtcDatetime
    updated_at: UtcDatetime


# ---------------------------------------------------------------------------
# Travel plans
# ---------------------------------------------------------------------------


class CreateTravelPlanInput(BaseModel):
    user_id: str
    mode: TravelMode
    departure_time: UtcDatetime
    arrival_time: UtcDatetime
    departure_location: str
    arrival_location: str
    booking_reference: Optional[str] = None
    duration_minutes: Optional[int] = None
    travel_provider: Optional[str] = None
    additional_info: Optional[str] = None


class UpdateTravelPlanInput(BaseModel):
    mode: Optional[TravelMode] = None
    departure_time: Optional[UtcDatetime] = None
    arrival_time: Optional[UtcDatetime] = None
    departure_location: Optional[str] = None
    arrival_location: Optional[str] = None
    booking_reference: Optional[str] = None
    duration_minutes: Optional[int] = None
    travel_provider: Optional[str] = None
    additional_info: Optional[str] = None

    @field_validator(
        "mode",
        "departure_time",
        "arrival_time",
        "departure_location",
        "arrival_location",
    )
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError(_NOT_NULL_MESSAGE)
        return v


class GetUserTravelPlansInput(BaseModel):
    user_id: str
    limit: Optional[int] = Field(default=None, gt=0)
    offset: Optional[int] = Field(default=None, ge=0)


class TravelPlanOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    mode: TravelMode
    departure_time: UtcDatetime
    arrival_time: UtcDatetime
    departure_location: str
    arrival_location: str
    booking_reference: Optional[str]
    duration_minutes: Optional[int]
    travel_provider: Optional[str]
    additional_info: Optional[str]
    created_at: UtcDatetime
    updated_at: UtcDatetime


# ---------------------------------------------------------------------------
# Travel documents
# ---------------------------------------------------------------------------


class CreateTravelDocumentInput(BaseModel):
    user_id: str
    name: str
    type: DocumentType
    file_hash: str
    file_url: str
    file_size: int = Field(ge=0)
    mime_type: str


class TravelDocumentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    name: str
    type: DocumentType
    file_hash: str
    file_url: str
    file_size: int
    mime_type: str
    created_at: UtcDatetime
    updated_at: UtcDatetime


# ---------------------------------------------------------------------------
# Posts
# ---------------------------------------------------------------------------


class CreatePostInput(BaseModel):
    user_id: str
    content: str
    image_urls: list[str] = Field(default_factory=list)
    location: Optional[str] = None


class GetPostsInput(BaseModel):
    """Omitted fields take the feed defaults; explicitly supplied ones are honoured."""

    limit: Optional[int] = Field(default=None, gt=0)
    offset: Optional[int] = Field(default=None, ge=0)


class PostOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    content: str
    image_urls: list[str]
    location: Optional[str]
    created_at: UtcDatetime
    updated_at: UtcDatetime


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


class CreateMessageInput(BaseModel):
    sender_id: str
    recipient_id: str
    content: str


class GetMessagesInput(BaseModel):
    user_id: str
    limit: Optional[int] = Field(default=None, gt=0)
    offset: Optional[int] = Field(default=None, ge=0)


class MarkMessageAsReadInput(BaseModel):
    message_id: str
    user_id: str


class MessageOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    sender_id: str
    recipient_id: str
    content: str
    is_read: bool
    created_at: UtcDatetime


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------


class FindTravelersInput(BaseModel):
    user_id: str
    location: Optional[str] = None
    interests: Optional[list[str]] = None
    limit: Optional[int] = Field(default=None, gt=0)
