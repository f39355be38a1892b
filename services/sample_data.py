import logging

from schemas.care_record import CareRecordCreate, CareType
from schemas.plant import (
    CareRequirements,
    LightRequirement,
    PlantCategory,
    PlantCreate,
    PlantDifficulty,
    PlantStats,
    PlantStatus,
    ValueRange,
)
from services.plant_store import PlantStore

logger = logging.getLogger(__name__)


SAMPLE_PLANTS = [
    PlantCreate(
        name="Pothos",
        species="Epipremnum aureum",
        variety="Golden",
        nickname="Goldie",
        planted_date="2024-01-15",
        acquired_date="2024-01-15",
        source="Flower shop",
        category=PlantCategory.FOLIAGE,
        difficulty=PlantDifficulty.EASY,
        status=PlantStatus.HEALTHY,
        location="Living room window",
        notes="Growing fast, leaves are deep green",
        care_requirements=CareRequirements(
            watering_frequency=7,
            fertilizing_frequency=30,
            light_requirement=LightRequirement.INDIRECT,
            temperature_range=ValueRange(min=18, max=25),
            humidity_range=ValueRange(min=40, max=60),
            soil_type="All-purpose potting mix",
            pot_size="Medium",
        ),
        current_stats=PlantStats(
            height=25,
            leaf_count=15,
            health_score=9,
            last_watered="2024-12-20",
            last_fertilized="2024-12-01",
        ),
    ),
    PlantCreate(
        name="Succulent",
        species="Haworthia cooperi",
        planted_date="2024-02-01",
        acquired_date="2024-02-01",
        source="Gift from a friend",
        category=PlantCategory.SUCCULENT,
        difficulty=PlantDifficulty.EASY,
        status=PlantStatus.HEALTHY,
        location="Balcony",
        care_requirements=CareRequirements(
            watering_frequency=14,
            fertilizing_frequency=60,
            light_requirement=LightRequirement.HIGH,
            temperature_range=ValueRange(min=15, max=30),
            humidity_range=ValueRange(min=30, max=50),
            soil_type="Succulent mix",
            pot_size="Small",
        ),
        current_stats=PlantStats(
            height=8,
            leaf_count=20,
            health_score=8,
            last_watered="2024-12-15",
            last_fertilized="2024-11-15",
        ),
    ),
    PlantCreate(
        name="Mint",
        species="Mentha spicata",
        planted_date="2024-03-10",
        acquired_date="2024-03-10",
        source="Grown from seed",
        category=PlantCategory.HERB,
        difficulty=PlantDifficulty.EASY,
        status=PlantStatus.HEALTHY,
        location="Kitchen window",
        notes="Good for tea",
        care_requirements=CareRequirements(
            watering_frequency=3,
            fertilizing_frequency=21,
            light_requirement=LightRequirement.MEDIUM,
            temperature_range=ValueRange(min=16, max=24),
            humidity_range=ValueRange(min=50, max=70),
            soil_type="Loose potting mix",
            pot_size="Medium",
        ),
        current_stats=PlantStats(
            height=15,
            leaf_count=30,
            health_score=9,
            last_watered="2024-12-21",
            last_fertilized="2024-12-10",
        ),
    ),
]

# 植物ごとに付けるケア記録 (type, date, notes)
SAMPLE_CARE = [
    (CareType.WATERING, "2024-12-21", "Regular watering"),
    (CareType.FERTILIZING, "2024-12-01", "Liquid fertilizer"),
]


async def create_sample_data(store: PlantStore) -> bool:
    """
    植物が 1 つも無いときだけサンプルデータを作る
    何度呼んでも重複しない。作ったら True
    """
    if store.plants:
        return False

    logger.info("creating sample plant data...")

    for plant_data in SAMPLE_PLANTS:
        plant = await store.add_plant(plant_data)

        for care_type, date, notes in SAMPLE_CARE:
            await store.add_care_record(
                CareRecordCreate(plant_id=plant.id, type=care_type, date=date, notes=notes)
            )

    logger.info("sample data created: %d plants", len(SAMPLE_PLANTS))
    return True
