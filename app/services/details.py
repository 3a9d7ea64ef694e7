# app/services/details.py
"""
상세 화면 표시용 필드 → 포맷터 매핑 (닫힌 목록).
progress x100 변환은 여기서만 한다.
"""
from __future__ import annotations

from typing import Callable, Dict, Iterable, Optional

from app.models.project import Project


def _fmt_number(v: float) -> str:
    return f"{v:g}"


DETAIL_FIELDS: Dict[str, Callable[[Project], str]] = {
    "name": lambda p: p.name,
    "description": lambda p: p.description,
    "status": lambda p: p.status.value.capitalize(),
    "userRole": lambda p: p.user_role.value.capitalize(),
    "cost": lambda p: f"${_fmt_number(p.cost)}",
    "progress": lambda p: f"{_fmt_number(round(p.progress * 100, 2))}%",
    "finishDate": lambda p: p.finish_date.strftime("%m/%d/%Y"),
    "initials": lambda p: p.initials,
}


def project_details(project: Project, keys: Optional[Iterable[str]] = None) -> Dict[str, str]:
    """keys 미지정 시 전체. 모르는 키는 무시."""
    wanted = list(keys) if keys is not None else list(DETAIL_FIELDS)
    return {k: DETAIL_FIELDS[k](project) for k in wanted if k in DETAIL_FIELDS}
