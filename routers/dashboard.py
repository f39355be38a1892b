from fastapi import APIRouter, Depends

from db.database import get_store
from schemas.dashboard import DashboardStats
from services.plant_store import PlantStore

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=DashboardStats)
def get_dashboard_stats(store: PlantStore = Depends(get_store)):
    return store.get_dashboard_stats()
