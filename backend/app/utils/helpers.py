"""입력값 정규화용 공용 헬퍼입니다."""

from typing import Iterable, List, Optional

from fastapi import HTTPException


def require_text(value: Optional[str], message: str) -> str:
    text = (value or "").strip()
    if not text:
        raise HTTPException(status_code=400, detail=message)
    return text


def clean_technologies(values: Optional[Iterable[str]]) -> List[str]:
    # 입력 순서를 유지하고 공백 태그는 버린다.
    return [str(item).strip() for item in (values or []) if str(item).strip()]


def split_search_terms(search: Optional[str]) -> List[str]:
    return [term for term in (search or "").split() if term]
