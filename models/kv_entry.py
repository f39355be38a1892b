from sqlalchemy import Column, String, Text, DateTime
from db.database import Base
from datetime import datetime

class KeyValueEntry(Base):
    __tablename__ = "kv_entries"

    key = Column(String, primary_key=True)

    # コレクション全体の JSON テキスト
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
