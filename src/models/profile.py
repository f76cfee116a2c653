"""
Profile model holding the cycle settings a user configures.
"""
from datetime import date, datetime, timezone
from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

MIN_CYCLE_LENGTH = 21
MAX_CYCLE_LENGTH = 45
DEFAULT_CYCLE_LENGTH = 28
DEFAULT_PERIOD_LENGTH = 5

def to_utc_date(value: Any) -> Any:
    """
    Normalise datetimes and ISO datetime strings to a UTC calendar date.

    All day arithmetic runs on UTC calendar dates. Naive datetimes are
    assumed to already be UTC. Anything else is returned untouched so the
    model validation can report it.
    """
    if isinstance(value, str) and len(value) > 10:
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return value
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value

class UserCycleProfile(BaseModel):
    """
    A user's cycle configuration.

    ``last_period_start`` is None until the user has onboarded; in that state
    the calculator returns a placeholder snapshot instead of failing.
    """
    user_id: str
    name: Optional[str] = None
    cycle_length: int = Field(DEFAULT_CYCLE_LENGTH, ge=MIN_CYCLE_LENGTH, le=MAX_CYCLE_LENGTH)
    period_length: int = Field(DEFAULT_PERIOD_LENGTH, ge=1)
    last_period_start: Optional[date] = None
    notifications_enabled: bool = True
    app_lock_enabled: bool = False

    @field_validator("last_period_start", mode="before")
    @classmethod
    def normalise_last_period_start(cls, value: Any) -> Any:
        return to_utc_date(value)

    @model_validator(mode="after")
    def check_period_fits_cycle(self) -> "UserCycleProfile":
        if self.period_length >= self.cycle_length:
            raise ValueError(
                f"period_length ({self.period_length}) must be shorter than "
                f"cycle_length ({self.cycle_length})"
            )
        return self

class ProfileSettingsUpdate(BaseModel):
    """
    Settings a user may change. Fields left unset keep their stored value.
    """
    name: Optional[str] = None
    cycle_length: Optional[int] = None
    period_length: Optional[int] = None
    last_period_start: Optional[date] = None
    notifications_enabled: Optional[bool] = None
    app_lock_enabled: Optional[bool] = None

    @field_validator("last_period_start", mode="before")
    @classmethod
    def normalise_last_period_start(cls, value: Any) -> Any:
        return to_utc_date(value)
