from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError
from typing import List, Optional

from db.database import get_store
from db.kv_store import StorageError
from schemas.care_record import CareRecord
from schemas.plant import Plant, PlantCategory, PlantCreate, PlantPhoto, PlantPhotoCreate, PlantUpdate
from services.plant_store import PlantStore

router = APIRouter(
    prefix="/plants",
    tags=["Plants"],
)


@router.get("/", response_model=List[Plant])
def list_plants(
    q: Optional[str] = Query(None, description="名前・品種・ニックネームで検索"),
    category: Optional[PlantCategory] = None,
    store: PlantStore = Depends(get_store),
):
    return store.list_plants(query=q, category=category)


@router.post("/", response_model=Plant)
async def create_plant(plant: PlantCreate, store: PlantStore = Depends(get_store)):
    try:
        return await store.add_plant(plant)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{plant_id}", response_model=Plant)
def get_plant(plant_id: str, store: PlantStore = Depends(get_store)):
    plant = store.get_plant(plant_id)
    if plant is None:
        raise HTTPException(status_code=404, detail="Plant not found")
    return plant


@router.patch("/{plant_id}", response_model=Plant)
async def update_plant(
    plant_id: str,
    updates: PlantUpdate,
    store: PlantStore = Depends(get_store),
):
    """
    渡したフィールドだけ更新（currentStats などは丸ごと置き換え）
    """
    try:
        plant = await store.update_plant(plant_id, updates)
    except ValidationError as e:
        # 必須フィールドに null を入れた場合など
        raise HTTPException(status_code=422, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))

    if plant is None:
        raise HTTPException(status_code=404, detail="Plant not found")
    return plant


@router.delete("/{plant_id}")
async def delete_plant(plant_id: str, store: PlantStore = Depends(get_store)):
    """植物と、その植物のケア記録・リマインダーをまとめて削除"""
    try:
        deleted = await store.delete_plant(plant_id)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))

    if not deleted:
        raise HTTPException(status_code=404, detail="Plant not found")
    return {"message": "Plant deleted"}


@router.get("/{plant_id}/care_records", response_model=List[CareRecord])
def get_care_history(plant_id: str, store: PlantStore = Depends(get_store)):
    if store.get_plant(plant_id) is None:
        raise HTTPException(status_code=404, detail="Plant not found")
    return store.get_care_history(plant_id)


@router.post("/{plant_id}/photos", response_model=PlantPhoto)
async def add_photo(
    plant_id: str,
    photo: PlantPhotoCreate,
    store: PlantStore = Depends(get_store),
):
    try:
        created = await store.add_photo(plant_id, photo)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))

    if created is None:
        raise HTTPException(status_code=404, detail="Plant not found")
    return created
