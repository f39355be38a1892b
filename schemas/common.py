# schemas/common.py
import re
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from services.time_utils import parse_iso

# 文字列のまま大小比較するので拡張形式だけ受け付ける
# (20241201 や 2024-W51-6 は不可)
ISO_EXTENDED = re.compile(
    r"\d{4}-\d{2}-\d{2}"
    r"(T\d{2}:\d{2}(:\d{2}(\.(\d{3}|\d{6}))?)?(Z|[+-]\d{2}:\d{2})?)?"
)


class CamelModel(BaseModel):
    """
    Python 側は snake_case、保存する JSON と API は camelCase
    (lastWatered, nextDue, ...)
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def validate_iso(value: str) -> str:
    if not ISO_EXTENDED.fullmatch(value) or parse_iso(value) is None:
        raise ValueError(f"not an ISO date: {value!r}")
    return value


def validate_optional_iso(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    return validate_iso(value)
