# app/services/users.py
from __future__ import annotations

from typing import Any

from loguru import logger

from app.core.errors import ValidationError
from app.models.user import User, create_user
from app.schemas.common import RosterRole
from .collection import OrderedCollection

DEFAULT_USER = {
    "name": "Admin User",
    "email": "admin@test.com",
    "role": RosterRole.ADMIN,
}


class UserRoster(OrderedCollection[User]):
    """append-only 사용자 목록 (중복 허용, 삭제/import 없음)."""

    def __init__(self, *, seed_default: bool = False) -> None:
        super().__init__()
        if seed_default:
            self.add(DEFAULT_USER)

    def add(self, fields: Any) -> User:
        try:
            user = create_user(fields)
        except ValueError as exc:
            raise ValidationError(f"Invalid user fields: {exc}") from exc
        self._append(user)
        logger.info("User added: {} <{}>", user.name, user.email)
        return user
