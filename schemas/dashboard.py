from typing import List

from schemas.care_record import CareRecord
from schemas.common import CamelModel


class DashboardStats(CamelModel):
    total_plants: int
    healthy_plants: int
    plants_needing_care: int
    # today_tasks は期限切れも含む（overdue_tasks と重複して数える）
    today_tasks: int
    overdue_tasks: int
    recent_activity: List[CareRecord]
