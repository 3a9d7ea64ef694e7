# ./app/core/state.py
# 프로세스 수명 동안 유지되는 인메모리 스토어 (단일 actor, 락 없음)

from __future__ import annotations
from functools import lru_cache

from app.core.config import settings
from app.services.hooks import logging_hooks
from app.services.projects import ProjectStore
from app.services.users import UserRoster


@lru_cache
def get_store() -> ProjectStore:
    """FastAPI Depends용 ProjectStore 싱글톤."""
    return ProjectStore(logging_hooks(), seed_default=settings.SEED_DEFAULTS)


@lru_cache
def get_roster() -> UserRoster:
    """FastAPI Depends용 UserRoster 싱글톤."""
    return UserRoster(seed_default=settings.SEED_DEFAULTS)
