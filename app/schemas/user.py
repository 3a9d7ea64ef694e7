# app/schemas/user.py
from __future__ import annotations

from .common import AppBaseModel, RosterRole


class UserIn(AppBaseModel):
    name: str
    email: str
    role: RosterRole = RosterRole.VIEWER


class UserOut(UserIn):
    id: str
