# routers/care_records.py
from fastapi import APIRouter, Depends, HTTPException
from typing import List, Optional

from db.database import get_store
from db.kv_store import StorageError
from schemas.care_record import CareRecord, CareRecordCreate
from services.plant_store import PlantStore

router = APIRouter(
    prefix="/care_records",
    tags=["Care Records"]
)


@router.get("/", response_model=List[CareRecord])
def get_care_records(
    plant_id: Optional[str] = None,
    store: PlantStore = Depends(get_store),
):
    """保存順のまま返す（日付順にしたいときは /plants/{id}/care_records）"""
    return store.list_care_records(plant_id)


@router.post("/", response_model=CareRecord)
async def create_care_record(
    data: CareRecordCreate,
    store: PlantStore = Depends(get_store),
):
    # 記録を付ける時点で植物が存在していること
    if store.get_plant(data.plant_id) is None:
        raise HTTPException(status_code=404, detail="Plant not found")

    try:
        return await store.add_care_record(data)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
