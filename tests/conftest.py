# tests/conftest.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List

import pytest

from app.models.project import Project
from app.services.hooks import StoreHooks
from app.services.projects import ProjectStore


@dataclass
class HookRecorder:
    """렌더 훅 호출 기록 (UI 계층 대역)"""

    created: List[Project] = field(default_factory=list)
    updated: List[Project] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)

    def hooks(self) -> StoreHooks:
        return StoreHooks(
            on_project_created=self.created.append,
            on_project_updated=self.updated.append,
            on_project_removed=self.removed.append,
        )


def project_fields(**overrides: Any) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "name": "Alpha Plan",
        "description": "First milestone",
        "status": "active",
        "user_role": "manager",
        "cost": 1200.0,
        "progress": 0.25,
        "finish_date": date(2024, 6, 1),
    }
    data.update(overrides)
    return data


@pytest.fixture()
def recorder() -> HookRecorder:
    return HookRecorder()


@pytest.fixture()
def store(recorder: HookRecorder) -> ProjectStore:
    return ProjectStore(recorder.hooks())


@pytest.fixture()
def client(store: ProjectStore):
    """
    인메모리 스토어를 테스트용 인스턴스로 교체한 API 클라이언트.
    Requires: pip install httpx
    """
    from fastapi.testclient import TestClient

    from app.core.state import get_roster, get_store
    from app.main import app
    from app.services.users import UserRoster

    roster = UserRoster(seed_default=True)
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_roster] = lambda: roster
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def fields():
    """project_fields(**overrides) 팩토리"""
    return project_fields
