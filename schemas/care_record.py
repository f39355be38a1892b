# schemas/care_record.py
from enum import Enum
from typing import Optional

from pydantic import field_validator

from schemas.common import CamelModel, validate_iso


class CareType(str, Enum):
    """ケア記録 / リマインダーの種別"""
    WATERING = "watering"
    FERTILIZING = "fertilizing"
    PRUNING = "pruning"
    REPOTTING = "repotting"
    PEST_CONTROL = "pest_control"
    DISEASE_TREATMENT = "disease_treatment"
    LOCATION_CHANGE = "location_change"
    MEASUREMENT = "measurement"
    PHOTO = "photo"
    OTHER = "other"


class CareRecordCreate(CamelModel):
    plant_id: str
    type: CareType
    date: str
    notes: Optional[str] = None
    amount: Optional[float] = None
    unit: Optional[str] = None
    product: Optional[str] = None
    before_photo: Optional[str] = None
    after_photo: Optional[str] = None

    @field_validator("date")
    @classmethod
    def check_date(cls, value: str) -> str:
        return validate_iso(value)


class CareRecord(CareRecordCreate):
    id: str
