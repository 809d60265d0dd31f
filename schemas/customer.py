# schemas/customer.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, StrictInt, field_serializer

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class CustomerResponse(BaseModel):
    id: int
    name: str
    phone: str
    active: bool
    created: datetime

    class Config:
        from_attributes = True

    @field_serializer("created", when_used="json")
    def _created_rfc3339(self, value: datetime) -> str:
        # tz 없는 값(SQLite CURRENT_TIMESTAMP)은 UTC 로 본다
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat()


class CustomerSave(BaseModel):
    """
    POST /customers 본문.
    id 가 없거나 0 이면 신규 등록, 그 외에는 name/phone 전체 수정.
    id 는 JSON 정수만 허용 ("1", 1.0 등은 400).
    active/created 는 받아도 무시한다 (저장소가 관리).
    """
    id: Optional[StrictInt] = Field(default=0, ge=INT64_MIN, le=INT64_MAX)
    name: str
    phone: str
    active: Optional[bool] = None
    created: Optional[datetime] = None

    @property
    def is_new(self) -> bool:
        return not self.id
