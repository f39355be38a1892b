# routers/reminders.py
from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError
from typing import List, Optional

from db.database import get_store
from db.kv_store import StorageError
from schemas.reminder import CareReminder, CareReminderCreate, CareReminderUpdate
from services.plant_store import PlantStore

router = APIRouter(prefix="/reminders", tags=["Reminders"])


@router.get("/", response_model=List[CareReminder])
def get_reminders(plant_id: Optional[str] = None, store: PlantStore = Depends(get_store)):
    return store.list_reminders(plant_id)


@router.post("/", response_model=CareReminder)
async def create_reminder(data: CareReminderCreate, store: PlantStore = Depends(get_store)):
    if store.get_plant(data.plant_id) is None:
        raise HTTPException(status_code=404, detail="Plant not found")

    try:
        return await store.add_reminder(data)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.patch("/{reminder_id}", response_model=CareReminder)
async def update_reminder(
    reminder_id: str,
    updates: CareReminderUpdate,
    store: PlantStore = Depends(get_store),
):
    try:
        reminder = await store.update_reminder(reminder_id, updates)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))

    if reminder is None:
        raise HTTPException(status_code=404, detail="Reminder not found")
    return reminder
