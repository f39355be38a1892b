# schemas/reminder.py
from typing import Optional

from pydantic import Field, field_validator

from schemas.care_record import CareType
from schemas.common import CamelModel, validate_iso, validate_optional_iso


class CareReminderBase(CamelModel):
    plant_id: str
    type: CareType
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    frequency: int = Field(..., ge=1, description="days")
    next_due: str
    is_active: bool = True
    custom_schedule: Optional[bool] = None

    @field_validator("next_due")
    @classmethod
    def check_next_due(cls, value: str) -> str:
        return validate_iso(value)


class CareReminderCreate(CareReminderBase):
    pass


class CareReminderUpdate(CamelModel):
    type: Optional[CareType] = None
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    frequency: Optional[int] = Field(None, ge=1)
    next_due: Optional[str] = None
    is_active: Optional[bool] = None
    custom_schedule: Optional[bool] = None

    @field_validator("next_due")
    @classmethod
    def check_next_due(cls, value: Optional[str]) -> Optional[str]:
        return validate_optional_iso(value)


class CareReminder(CareReminderBase):
    id: str
