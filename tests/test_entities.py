# tests/test_entities.py
from __future__ import annotations

from datetime import date, datetime

import pytest

from app.models.project import coerce_date, create_project, create_todo, new_id
from app.models.user import create_user
from app.schemas.common import ProjectStatus, RosterRole, ToDoStatus, UserRole


def test_create_project_generates_id_and_defaults():
    p = create_project({"name": "Alpha Plan", "description": "d", "status": "paused",
                        "user_role": "architect", "finish_date": "2024-01-31"})
    assert p.id
    assert p.todo_list == []
    assert p.cost == 0.0
    assert p.progress == 0.0
    assert p.status is ProjectStatus.PAUSED
    assert p.user_role is UserRole.ARCHITECT
    assert p.finish_date == date(2024, 1, 31)


def test_create_project_keeps_supplied_id_and_regenerates_empty_one(fields):
    assert create_project(fields(id="abc-123")).id == "abc-123"
    assert create_project(fields(id="")).id not in ("", None)


def test_create_project_builds_todos_in_order(fields):
    p = create_project(fields(todo_list=[
        {"text": "first", "date": "2024-02-01"},
        {"id": "t2", "text": "second", "date": "2024-02-02", "status": "finished"},
    ]))
    assert [t.text for t in p.todo_list] == ["first", "second"]
    assert p.todo_list[0].status is ToDoStatus.PENDING
    assert p.todo_list[1].id == "t2"
    assert p.todo_list[1].status is ToDoStatus.FINISHED


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Alpha Plan", "AP"),
        ("my big project", "MB"),
        ("website", "WE"),
        ("x", "X"),
        ("", ""),
    ],
)
def test_initials(fields, name, expected):
    assert create_project(fields(name=name)).initials == expected


def test_initials_follow_renames(fields):
    p = create_project(fields(name="Alpha Plan"))
    p.name = "Beta Release"
    assert p.initials == "BR"


def test_ids_are_unique():
    ids = {new_id() for _ in range(1000)}
    assert len(ids) == 1000
    assert len(next(iter(ids))) == 36


@pytest.mark.parametrize(
    "value",
    [
        "2024-05-01",
        "2024-05-01T00:00:00",
        "2024-05-01T10:20:30.000Z",
        "2024-05-01T23:00:00+02:00",
        datetime(2024, 5, 1, 8, 30),
        date(2024, 5, 1),
    ],
)
def test_coerce_date_accepts_iso_forms(value):
    assert coerce_date(value) == date(2024, 5, 1)


@pytest.mark.parametrize("value", ["not a date", "2024-13-40", "", 20240501, None])
def test_coerce_date_rejects_garbage(value):
    with pytest.raises(ValueError):
        coerce_date(value)


def test_create_todo_and_user_generate_ids():
    t = create_todo({"text": "write docs", "date": date(2024, 3, 3)})
    assert t.id and t.status is ToDoStatus.PENDING
    u = create_user({"name": "Jane Roe", "email": "jane@example.com", "role": "editor"})
    assert u.id and u.role is RosterRole.EDITOR
