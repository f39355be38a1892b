# schemas/plant.py
from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator

from schemas.common import CamelModel, validate_optional_iso


class PlantCategory(str, Enum):
    FOLIAGE = "foliage"
    SUCCULENT = "succulent"
    FLOWERING = "flowering"
    HERB = "herb"
    VEGETABLE = "vegetable"
    FRUIT = "fruit"
    TREE = "tree"
    VINE = "vine"
    FERN = "fern"
    CACTUS = "cactus"
    OTHER = "other"


class PlantDifficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class PlantStatus(str, Enum):
    HEALTHY = "healthy"
    NEEDS_ATTENTION = "needs_attention"
    SICK = "sick"
    DORMANT = "dormant"
    DEAD = "dead"


class LightRequirement(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    DIRECT = "direct"
    INDIRECT = "indirect"


class ValueRange(CamelModel):
    min: float
    max: float


class CareRequirements(CamelModel):
    """目標値（実測ではない）"""
    watering_frequency: int = Field(7, ge=1, description="days")
    fertilizing_frequency: int = Field(30, ge=1, description="days")
    light_requirement: LightRequirement = LightRequirement.MEDIUM
    temperature_range: ValueRange = Field(default_factory=lambda: ValueRange(min=18, max=25))
    humidity_range: ValueRange = Field(default_factory=lambda: ValueRange(min=40, max=60))
    soil_type: str = ""
    pot_size: str = ""


class PlantStats(CamelModel):
    height: float = Field(0, ge=0, description="cm")
    leaf_count: int = Field(0, ge=0)
    health_score: int = Field(8, ge=1, le=10)
    # 最初のケア記録が付くまでは None
    last_watered: Optional[str] = None
    last_fertilized: Optional[str] = None
    last_pruned: Optional[str] = None
    last_repotted: Optional[str] = None
    is_flowering: bool = False
    has_fruit: bool = False


class PhotoMeasurements(CamelModel):
    height: Optional[float] = None
    width: Optional[float] = None
    leaf_count: Optional[int] = None


class PlantPhotoCreate(CamelModel):
    uri: str
    date: Optional[str] = None
    description: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    measurements: Optional[PhotoMeasurements] = None

    @field_validator("date")
    @classmethod
    def check_date(cls, value: Optional[str]) -> Optional[str]:
        return validate_optional_iso(value)


class PlantPhoto(PlantPhotoCreate):
    id: str
    date: str


class PlantBase(CamelModel):
    name: str = Field(..., min_length=1)
    species: str = Field(..., min_length=1)
    variety: Optional[str] = None
    nickname: Optional[str] = None
    planted_date: Optional[str] = None
    acquired_date: Optional[str] = None
    source: str = ""
    category: PlantCategory = PlantCategory.OTHER
    difficulty: PlantDifficulty = PlantDifficulty.MEDIUM
    status: PlantStatus = PlantStatus.HEALTHY
    location: str = ""
    notes: Optional[str] = None
    care_requirements: CareRequirements = Field(default_factory=CareRequirements)
    current_stats: PlantStats = Field(default_factory=PlantStats)
    photos: List[PlantPhoto] = Field(default_factory=list)

    @field_validator("planted_date", "acquired_date")
    @classmethod
    def check_dates(cls, value: Optional[str]) -> Optional[str]:
        return validate_optional_iso(value)


class PlantCreate(PlantBase):
    pass


class PlantUpdate(CamelModel):
    """
    部分更新。渡したフィールドだけ上書きする（ネストしたオブジェクトは丸ごと置き換え）
    """
    name: Optional[str] = Field(None, min_length=1)
    species: Optional[str] = Field(None, min_length=1)
    variety: Optional[str] = None
    nickname: Optional[str] = None
    planted_date: Optional[str] = None
    acquired_date: Optional[str] = None
    source: Optional[str] = None
    category: Optional[PlantCategory] = None
    difficulty: Optional[PlantDifficulty] = None
    status: Optional[PlantStatus] = None
    location: Optional[str] = None
    notes: Optional[str] = None
    care_requirements: Optional[CareRequirements] = None
    current_stats: Optional[PlantStats] = None
    photos: Optional[List[PlantPhoto]] = None

    @field_validator("planted_date", "acquired_date")
    @classmethod
    def check_dates(cls, value: Optional[str]) -> Optional[str]:
        return validate_optional_iso(value)


class Plant(PlantBase):
    id: str
    created_at: str
    updated_at: str
