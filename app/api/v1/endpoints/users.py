# app/api/v1/endpoints/users.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from app.core.state import get_roster
from app.schemas.user import UserIn, UserOut
from app.services.users import UserRoster

router = APIRouter(tags=["users"])


def _to_out(user) -> UserOut:
    return UserOut(id=user.id, name=user.name, email=user.email, role=user.role)


@router.get("/users", response_model=List[UserOut])
def list_users(roster: UserRoster = Depends(get_roster)):
    return [_to_out(u) for u in roster]


@router.post("/users", response_model=UserOut, status_code=201)
def create_user(payload: UserIn, roster: UserRoster = Depends(get_roster)):
    return _to_out(roster.add(payload))
