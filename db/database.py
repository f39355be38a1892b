# db/database.py
import os
from dotenv import load_dotenv

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

load_dotenv()

# 端末ローカルに保存するので既定は SQLite ファイル
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./plant_care.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"


def create_db_engine(url: str = DATABASE_URL, echo: bool = SQL_ECHO):
    connect_args = {}
    if url.startswith("sqlite"):
        # to_thread で別スレッドから触るため
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=echo, connect_args=connect_args)


engine = create_db_engine()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_store(request: Request):
    """lifespan で作った PlantStore をルーターに渡す"""
    return request.app.state.store
