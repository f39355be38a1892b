"""
ローカルの DB にサンプルの植物データを入れる
植物が既にあるときは何もしない

  python scripts/seed_sample_data.py
"""
import asyncio
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from db.database import engine, Base  # noqa: E402
from db.kv_store import SqlKeyValueStore  # noqa: E402
from models.kv_entry import KeyValueEntry  # noqa: E402,F401
from services.plant_store import PlantStore  # noqa: E402
from services.sample_data import create_sample_data  # noqa: E402


async def main() -> None:
    Base.metadata.create_all(bind=engine)

    store = PlantStore(SqlKeyValueStore())
    await store.load()

    if await create_sample_data(store):
        print(f"created {len(store.plants)} plants, {len(store.care_records)} care records")
    else:
        print(f"skipped: {len(store.plants)} plants already exist")


if __name__ == "__main__":
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
    asyncio.run(main())
