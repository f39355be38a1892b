from datetime import datetime, timezone
from typing import Optional


def utc_now_iso() -> str:
    """createdAt / updatedAt 用の現在時刻 (UTC, ISO 形式)"""
    return datetime.now(timezone.utc).isoformat()


def today_iso() -> str:
    """UTC の今日を YYYY-MM-DD で返す"""
    return datetime.now(timezone.utc).date().isoformat()


def to_naive_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """aware/naive混在をUTC naiveに揃える"""
    if dt is None:
        return None
    if dt.tzinfo is not None and dt.utcoffset() is not None:
        return dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


def parse_iso(dt_str: str) -> Optional[datetime]:
    """
    "2024-12-21" のような日付だけの文字列も、Z付きISOもパースできるようにする
    パースできなければ None
    """
    if not dt_str:
        return None
    try:
        if dt_str.endswith("Z"):
            dt_str = dt_str[:-1] + "+00:00"
        return to_naive_utc(datetime.fromisoformat(dt_str))
    except ValueError:
        return None


def sort_key(dt_str: str) -> datetime:
    # パースできない日付は一番古い扱い
    return parse_iso(dt_str) or datetime.min
