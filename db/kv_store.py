# db/kv_store.py
import asyncio
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from db.database import SessionLocal
from models.kv_entry import KeyValueEntry


class StorageError(Exception):
    """永続化バックエンドの読み書きに失敗した"""


class SqlKeyValueStore:
    """
    kv_entries テーブル 1 つで get / set / clear を提供する KV ストア
    SQLAlchemy は同期なので、各操作はワーカースレッドで実行する
    """

    def __init__(self, session_factory: sessionmaker = SessionLocal):
        self._session_factory = session_factory

    async def get(self, key: str) -> Optional[str]:
        return await asyncio.to_thread(self._get, key)

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._set, key, value)

    async def clear(self) -> None:
        await asyncio.to_thread(self._clear)

    # -------------------------
    # sync implementations
    # -------------------------
    def _get(self, key: str) -> Optional[str]:
        db = self._session_factory()
        try:
            entry = db.query(KeyValueEntry).filter(KeyValueEntry.key == key).first()
            return entry.value if entry else None
        except SQLAlchemyError as e:
            raise StorageError(f"failed to read {key}: {e}") from e
        finally:
            db.close()

    def _set(self, key: str, value: str) -> None:
        db = self._session_factory()
        try:
            entry = db.query(KeyValueEntry).filter(KeyValueEntry.key == key).first()
            if entry is None:
                db.add(KeyValueEntry(key=key, value=value))
            else:
                entry.value = value
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise StorageError(f"failed to write {key}: {e}") from e
        finally:
            db.close()

    def _clear(self) -> None:
        db = self._session_factory()
        try:
            db.query(KeyValueEntry).delete()
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise StorageError(f"failed to clear storage: {e}") from e
        finally:
            db.close()
