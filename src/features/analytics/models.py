"""Analytics data models."""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class SymptomCategory(str, Enum):
    """Closed set of categories a consultation can be assigned to."""

    DOLOR = "Dolor"
    FIEBRE = "Fiebre"
    TOS = "Tos"
    ALERGIAS = "Alergias"
    OTROS = "Otros"


# Vocabulary shown on the dashboard, independent of the data
COMMON_SYMPTOMS: tuple[str, ...] = tuple(
    sorted(
        category.value
        for category in SymptomCategory
        if category is not SymptomCategory.OTROS
    )
)


class Message(BaseModel):
    """Single message from the consultation log."""

    model_config = ConfigDict(frozen=True)

    id: str
    sender_id: str
    receiver_id: str
    message_content: str | None = None
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # Naive timestamps from the datastore are UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class RecentMessage(_CamelModel):
    """Message as shown in the recent activity feed."""

    id: str
    sender_id: str
    receiver_id: str
    message_content: str | None = None
    created_at: datetime


class CategoryCount(_CamelModel):
    """Number of consultations assigned to one category."""

    category: SymptomCategory
    count: int = Field(ge=0)


class HourBucket(_CamelModel):
    """Consultations that fall in one hour of the day."""

    hour: int = Field(ge=0, le=23)
    count: int = Field(gt=0)


class UserActivity(_CamelModel):
    """Activity summary for one end user."""

    message_count: int
    last_activity_timestamp: datetime


class AnalyticsSnapshot(_CamelModel):
    """Complete result of one analytics pass over the message log."""

    symptom_categories: list[CategoryCount] = Field(default_factory=list)
    response_time_seconds: float = Field(default=0.0, ge=0)
    total_consultations: int = 0
    total_messages: int = 0
    active_users: int = 0
    common_symptoms: list[str] = Field(default_factory=lambda: list(COMMON_SYMPTOMS))
    hourly_activity: list[HourBucket] = Field(default_factory=list)
    recent_messages: list[RecentMessage] = Field(default_factory=list)
    per_user_summary: dict[str, UserActivity] = Field(default_factory=dict)


class ConnectionStatus(BaseModel):
    """Result of an explicit data source health check."""

    ok: bool
    collection: str
    sample_size: int = 0
    error: str | None = None
