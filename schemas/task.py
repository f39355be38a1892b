# schemas/task.py
from enum import Enum
from typing import Optional

from schemas.care_record import CareType
from schemas.common import CamelModel


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class CareTask(CamelModel):
    """有効なリマインダー + 植物名。保存はしない"""
    id: str
    plant_id: str
    plant_name: str
    type: CareType
    title: str
    due_date: str
    is_overdue: bool
    priority: TaskPriority
    # 完了管理はまだ無いので常に False
    completed: bool = False
    completed_at: Optional[str] = None
