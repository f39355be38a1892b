# routers/tasks.py
from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from db.database import get_store
from schemas.common import validate_iso
from schemas.task import CareTask
from services.plant_store import PlantStore
from services.time_utils import today_iso

router = APIRouter(prefix="/tasks", tags=["Tasks"])


@router.get("/", response_model=List[CareTask])
def get_tasks(
    date: Optional[str] = Query(None, description="YYYY-MM-DD（省略時は今日）"),
    store: PlantStore = Depends(get_store),
):
    """
    その日までに期限が来ている有効なリマインダーを、植物名付きで返す
    期限切れは priority=high
    """
    if date is None:
        date = today_iso()
    else:
        try:
            validate_iso(date)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))

    return store.get_care_tasks_for_date(date)
