# services/plant_store.py
import asyncio
import logging
import uuid
from typing import Callable, Dict, List, Optional

from pydantic import TypeAdapter, ValidationError

from db.kv_store import StorageError
from schemas.care_record import CareRecord, CareRecordCreate, CareType
from schemas.dashboard import DashboardStats
from schemas.plant import (
    Plant,
    PlantCategory,
    PlantCreate,
    PlantPhoto,
    PlantPhotoCreate,
    PlantStatus,
    PlantUpdate,
)
from schemas.reminder import CareReminder, CareReminderCreate, CareReminderUpdate
from schemas.task import CareTask, TaskPriority
from services.time_utils import sort_key, today_iso, utc_now_iso

logger = logging.getLogger(__name__)

# コレクション名 -> KV のキー
STORAGE_KEYS = {
    "plants": "@plant_care_plants",
    "care_records": "@plant_care_records",
    "reminders": "@plant_care_reminders",
}

_ADAPTERS = {
    "plants": TypeAdapter(List[Plant]),
    "care_records": TypeAdapter(List[CareRecord]),
    "reminders": TypeAdapter(List[CareReminder]),
}

# この種別の記録を追加したら currentStats の該当フィールドを記録日で上書きする
STAT_FIELDS = {
    CareType.WATERING: "last_watered",
    CareType.FERTILIZING: "last_fertilized",
    CareType.PRUNING: "last_pruned",
    CareType.REPOTTING: "last_repotted",
}

NEEDS_CARE_STATUSES = {PlantStatus.NEEDS_ATTENTION, PlantStatus.SICK}
UNKNOWN_PLANT_NAME = "Unknown Plant"
RECENT_ACTIVITY_LIMIT = 5

Listener = Callable[["PlantStore"], None]


def new_id() -> str:
    return uuid.uuid4().hex


class PlantStore:
    """
    plants / care_records / reminders の 3 コレクションを持つストア

    - 変更系はすべて「次のコレクションを作る → 丸ごと保存 → 差し替え」の順
      保存に失敗したらメモリ上の状態は変わらない
    - 植物を消すと、その植物のケア記録とリマインダーも消す
    - ダッシュボード等の集計は毎回いまの状態から計算する
    """

    def __init__(self, backend, id_factory: Callable[[], str] = new_id):
        self._backend = backend
        self._new_id = id_factory
        self._listeners: List[Listener] = []

        self.plants: Dict[str, Plant] = {}
        self.care_records: Dict[str, CareRecord] = {}
        self.reminders: Dict[str, CareReminder] = {}
        # load() が終わるまでは True（コレクションはまだ信用しない）
        self.loading = True

    # -------------------------
    # subscribe / notify
    # -------------------------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("store listener failed")

    # -------------------------
    # load / persist
    # -------------------------
    async def load(self) -> None:
        self.loading = True
        plants, care_records, reminders = await asyncio.gather(
            self._load_collection("plants"),
            self._load_collection("care_records"),
            self._load_collection("reminders"),
        )
        self.plants = {p.id: p for p in plants}
        self.care_records = {r.id: r for r in care_records}
        self.reminders = {r.id: r for r in reminders}
        self.loading = False

        logger.info(
            "loaded %d plants, %d care records, %d reminders",
            len(self.plants), len(self.care_records), len(self.reminders),
        )
        self._notify()

    async def reload(self) -> None:
        await self.load()

    async def _load_collection(self, name: str) -> list:
        key = STORAGE_KEYS[name]
        try:
            raw = await self._backend.get(key)
        except StorageError as e:
            logger.error("error loading %s, treating as empty: %s", key, e)
            return []

        if raw is None:
            return []

        try:
            return _ADAPTERS[name].validate_json(raw)
        except ValidationError as e:
            logger.error("corrupt data under %s, treating as empty: %s", key, e)
            return []

    async def _persist(self, name: str, collection: dict) -> None:
        payload = _ADAPTERS[name].dump_json(list(collection.values()), by_alias=True)
        try:
            await self._backend.set(STORAGE_KEYS[name], payload.decode("utf-8"))
        except StorageError as e:
            logger.error("error saving %s: %s", name, e)
            raise

    async def reset(self) -> None:
        """アプリデータを全部消す（設定画面の「データ削除」）"""
        try:
            await self._backend.clear()
        except StorageError as e:
            logger.error("error clearing data: %s", e)
            raise

        self.plants = {}
        self.care_records = {}
        self.reminders = {}
        logger.info("all plant data cleared")
        self._notify()

    # -------------------------
    # plants
    # -------------------------
    async def add_plant(self, data: PlantCreate) -> Plant:
        now = utc_now_iso()
        plant = Plant.model_validate(
            {**data.model_dump(), "id": self._new_id(), "created_at": now, "updated_at": now}
        )

        plants = {**self.plants, plant.id: plant}
        await self._persist("plants", plants)
        self.plants = plants
        self._notify()
        return plant

    async def update_plant(self, plant_id: str, updates: PlantUpdate) -> Optional[Plant]:
        """
        渡されたフィールドだけ浅くマージする。id が無ければ何もしないで None
        """
        plant = self.plants.get(plant_id)
        if plant is None:
            return None

        changes = {name: getattr(updates, name) for name in updates.model_fields_set}
        updated = Plant.model_validate(
            {**plant.model_dump(), **changes, "updated_at": utc_now_iso()}
        )

        plants = {**self.plants, plant_id: updated}
        await self._persist("plants", plants)
        self.plants = plants
        self._notify()
        return updated

    async def delete_plant(self, plant_id: str) -> bool:
        if plant_id not in self.plants:
            return False

        plants = {k: p for k, p in self.plants.items() if k != plant_id}
        care_records = {k: r for k, r in self.care_records.items() if r.plant_id != plant_id}
        reminders = {k: r for k, r in self.reminders.items() if r.plant_id != plant_id}

        await self._persist("plants", plants)
        await self._persist("care_records", care_records)
        await self._persist("reminders", reminders)

        logger.info(
            "deleted plant %s (%d care records, %d reminders removed)",
            plant_id,
            len(self.care_records) - len(care_records),
            len(self.reminders) - len(reminders),
        )
        self.plants = plants
        self.care_records = care_records
        self.reminders = reminders
        self._notify()
        return True

    async def add_photo(self, plant_id: str, data: PlantPhotoCreate) -> Optional[PlantPhoto]:
        plant = self.plants.get(plant_id)
        if plant is None:
            return None

        photo = PlantPhoto.model_validate(
            {**data.model_dump(), "id": self._new_id(), "date": data.date or utc_now_iso()}
        )
        updated = await self.update_plant(plant_id, PlantUpdate(photos=[*plant.photos, photo]))
        if updated is None:
            # 途中で植物が消された
            return None
        return photo

    def get_plant(self, plant_id: str) -> Optional[Plant]:
        return self.plants.get(plant_id)

    def list_plants(
        self, query: Optional[str] = None, category: Optional[PlantCategory] = None
    ) -> List[Plant]:
        plants = list(self.plants.values())

        # 名前・品種・ニックネームで検索
        if query and query.strip():
            q = query.strip().lower()
            plants = [
                p for p in plants
                if q in p.name.lower()
                or q in p.species.lower()
                or (p.nickname is not None and q in p.nickname.lower())
            ]

        if category is not None:
            plants = [p for p in plants if p.category == category]

        return plants

    # -------------------------
    # care records
    # -------------------------
    async def add_care_record(self, data: CareRecordCreate) -> CareRecord:
        record = CareRecord.model_validate({**data.model_dump(), "id": self._new_id()})

        care_records = {**self.care_records, record.id: record}
        await self._persist("care_records", care_records)
        self.care_records = care_records
        self._notify()

        # 記録を保存してから植物の lastX を更新する（順番に await する）
        # 日付が古くても上書き（後勝ち）
        field = STAT_FIELDS.get(record.type)
        plant = self.plants.get(record.plant_id)
        if field is not None and plant is not None:
            stats = plant.current_stats.model_copy(update={field: record.date})
            await self.update_plant(plant.id, PlantUpdate(current_stats=stats))

        return record

    def list_care_records(self, plant_id: Optional[str] = None) -> List[CareRecord]:
        records = list(self.care_records.values())
        if plant_id is not None:
            records = [r for r in records if r.plant_id == plant_id]
        return records

    def get_care_history(self, plant_id: str) -> List[CareRecord]:
        """植物ごとのケア履歴（新しい順）"""
        return sorted(
            self.list_care_records(plant_id),
            key=lambda r: sort_key(r.date),
            reverse=True,
        )

    # -------------------------
    # reminders
    # -------------------------
    async def add_reminder(self, data: CareReminderCreate) -> CareReminder:
        reminder = CareReminder.model_validate({**data.model_dump(), "id": self._new_id()})

        reminders = {**self.reminders, reminder.id: reminder}
        await self._persist("reminders", reminders)
        self.reminders = reminders
        self._notify()
        return reminder

    async def update_reminder(
        self, reminder_id: str, updates: CareReminderUpdate
    ) -> Optional[CareReminder]:
        reminder = self.reminders.get(reminder_id)
        if reminder is None:
            return None

        changes = {name: getattr(updates, name) for name in updates.model_fields_set}
        updated = CareReminder.model_validate({**reminder.model_dump(), **changes})

        reminders = {**self.reminders, reminder_id: updated}
        await self._persist("reminders", reminders)
        self.reminders = reminders
        self._notify()
        return updated

    def get_reminder(self, reminder_id: str) -> Optional[CareReminder]:
        return self.reminders.get(reminder_id)

    def list_reminders(self, plant_id: Optional[str] = None) -> List[CareReminder]:
        reminders = list(self.reminders.values())
        if plant_id is not None:
            reminders = [r for r in reminders if r.plant_id == plant_id]
        return reminders

    # -------------------------
    # derived views
    # -------------------------
    def get_dashboard_stats(self, today: Optional[str] = None) -> DashboardStats:
        if today is None:
            today = today_iso()

        plants = list(self.plants.values())
        active = [r for r in self.reminders.values() if r.is_active]
        recent = sorted(
            self.care_records.values(),
            key=lambda r: sort_key(r.date),
            reverse=True,
        )[:RECENT_ACTIVITY_LIMIT]

        return DashboardStats(
            total_plants=len(plants),
            healthy_plants=sum(1 for p in plants if p.status == PlantStatus.HEALTHY),
            plants_needing_care=sum(1 for p in plants if p.status in NEEDS_CARE_STATUSES),
            today_tasks=sum(1 for r in active if r.next_due <= today),
            overdue_tasks=sum(1 for r in active if r.next_due < today),
            recent_activity=recent,
        )

    def get_care_tasks_for_date(self, date: str) -> List[CareTask]:
        tasks: List[CareTask] = []
        for reminder in self.reminders.values():
            if not reminder.is_active or reminder.next_due > date:
                continue

            plant = self.plants.get(reminder.plant_id)
            is_overdue = reminder.next_due < date
            tasks.append(
                CareTask(
                    id=reminder.id,
                    plant_id=reminder.plant_id,
                    plant_name=plant.name if plant is not None else UNKNOWN_PLANT_NAME,
                    type=reminder.type,
                    title=reminder.title,
                    due_date=reminder.next_due,
                    is_overdue=is_overdue,
                    priority=TaskPriority.HIGH if is_overdue else TaskPriority.MEDIUM,
                )
            )
        return tasks
