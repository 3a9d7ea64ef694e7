# app/models/user.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from app.schemas.common import RosterRole
from .project import _as_dict, new_id


@dataclass
class User:
    id: str
    name: str
    email: str
    role: RosterRole = RosterRole.VIEWER


def create_user(fields: Any) -> User:
    data = _as_dict(fields)
    return User(
        id=str(data.get("id") or new_id()),
        name=str(data.get("name") or ""),
        email=str(data.get("email") or ""),
        role=RosterRole(data.get("role") or RosterRole.VIEWER),
    )
