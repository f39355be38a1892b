import logging
import os
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from db.database import engine, Base
from db.kv_store import SqlKeyValueStore

# models を import しておく（create_all がテーブルを認識するため）
from models.kv_entry import KeyValueEntry

from routers import care_records, dashboard, plants, reminders, settings, tasks
from services.plant_store import PlantStore
from services.sample_data import create_sample_data

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
SEED_SAMPLE_DATA = os.getenv("SEED_SAMPLE_DATA", "false").lower() == "true"

logging.basicConfig(level=LOG_LEVEL.upper())
logger = logging.getLogger("plant_care")

# 起動時間の記録（任意）
STARTED_AT = time.time()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    起動時に1回だけ実行される処理
    - KV テーブル作成
    - ストアを作って 3 コレクションを読み込む
    - 必要ならサンプルデータ投入
    """
    Base.metadata.create_all(bind=engine)

    store = PlantStore(SqlKeyValueStore())
    app.state.store = store
    await store.load()

    if SEED_SAMPLE_DATA:
        await create_sample_data(store)

    logger.info("plant care store ready")
    yield


app = FastAPI(title="Plant Care Tracker API", lifespan=lifespan)

# --- CORS設定（端末ローカルの UI から叩く）---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- ルーター ---
app.include_router(plants.router)
app.include_router(care_records.router)
app.include_router(reminders.router)
app.include_router(tasks.router)
app.include_router(dashboard.router)
app.include_router(settings.router)


@app.get("/ping", include_in_schema=False)
def ping():
    store = getattr(app.state, "store", None)
    return {
        "ok": True,
        "service": "plant-care",
        "ts": datetime.now(timezone.utc).isoformat(),
        "uptime_sec": round(time.time() - STARTED_AT, 2),
        # True の間はコレクションがまだ読み込み中
        "loading": store.loading if store is not None else True,
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=int(os.getenv("PORT", 8000)))
