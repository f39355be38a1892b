# routers/settings.py
from fastapi import APIRouter, Depends, HTTPException

from db.database import get_store
from db.kv_store import StorageError
from services.plant_store import PlantStore
from services.sample_data import create_sample_data

router = APIRouter(
    prefix="/settings",
    tags=["Settings"],
)


@router.post("/reset")
async def reset_app_data(store: PlantStore = Depends(get_store)):
    """全データ削除（元に戻せない）"""
    try:
        await store.reset()
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"message": "All data cleared"}


@router.post("/reload")
async def reload_data(store: PlantStore = Depends(get_store)):
    await store.reload()
    return {
        "plants": len(store.plants),
        "care_records": len(store.care_records),
        "reminders": len(store.reminders),
    }


@router.post("/sample_data")
async def load_sample_data(store: PlantStore = Depends(get_store)):
    try:
        created = await create_sample_data(store)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"created": created}
