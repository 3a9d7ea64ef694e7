# tests/test_project_store.py
from __future__ import annotations

from datetime import date

import pytest

from app.core.errors import DuplicateNameError, NotFoundError, ValidationError
from app.schemas.common import ProjectStatus, ToDoStatus, UserRole
from app.schemas.project import ProjectIn
from app.services.hooks import StoreHooks
from app.services.projects import DEFAULT_PROJECT_NAME, ProjectStore


def _snapshot(store: ProjectStore):
    return [(p.id, p.name) for p in store]


# -----------------------------------------------------------------------------
# add / get
# -----------------------------------------------------------------------------
def test_add_then_get_returns_equal_project(store, recorder, fields):
    p = store.add(fields())
    got = store.get(p.id)

    assert got is p
    assert got.name == "Alpha Plan"
    assert got.description == "First milestone"
    assert got.status is ProjectStatus.ACTIVE
    assert got.user_role is UserRole.MANAGER
    assert got.cost == 1200.0
    assert got.progress == 0.25
    assert got.finish_date == date(2024, 6, 1)
    assert got.todo_list == []
    assert recorder.created == [p]


def test_add_accepts_form_schema(store):
    p = store.add(ProjectIn(name="Form Project", userRole="supervisor", finishDate="2025-01-02"))
    assert p.user_role is UserRole.SUPERVISOR
    assert p.finish_date == date(2025, 1, 2)


@pytest.mark.parametrize("name", ["", "abcd", "  x "])
def test_add_short_name_fails_and_leaves_store_unchanged(store, recorder, fields, name):
    store.add(fields(name="Existing One"))
    before = _snapshot(store)

    with pytest.raises(ValidationError):
        store.add(fields(name=name))

    assert _snapshot(store) == before
    assert len(recorder.created) == 1


def test_add_duplicate_name_fails_and_leaves_store_unchanged(store, fields):
    store.add(fields())
    before = _snapshot(store)

    with pytest.raises(DuplicateNameError):
        store.add(fields(description="other"))

    assert _snapshot(store) == before


def test_name_uniqueness_is_case_sensitive(store, fields):
    store.add(fields(name="Alpha Plan"))
    store.add(fields(name="alpha plan"))
    assert len(store) == 2


@pytest.mark.parametrize(
    "overrides",
    [
        {"progress": 1.5},
        {"progress": -0.1},
        {"progress": 50},
        {"cost": -1},
        {"cost": "lots"},
        {"status": "archived"},
        {"user_role": "ceo"},
        {"finish_date": "someday"},
    ],
)
def test_add_rejects_invalid_fields(store, fields, overrides):
    with pytest.raises(ValidationError):
        store.add(fields(**overrides))
    assert len(store) == 0


def test_add_rejects_id_already_in_use(store, fields):
    p = store.add(fields())
    with pytest.raises(ValidationError):
        store.add(fields(id=p.id, name="Another Plan"))
    assert len(store) == 1


def test_insertion_order_is_preserved(store, fields):
    names = ["Project One", "Project Two", "Project Three"]
    for n in names:
        store.add(fields(name=n))
    assert [p.name for p in store] == names


def test_get_is_exact_match_only(store, fields):
    p = store.add(fields())
    assert store.get(p.id[:8]) is None
    assert store.get(p.id.upper()) is None
    assert store.get("") is None
    assert p.id in store


# -----------------------------------------------------------------------------
# remove
# -----------------------------------------------------------------------------
def test_remove_missing_id_is_noop(store, recorder, fields):
    store.add(fields())
    before = _snapshot(store)

    assert store.remove("does-not-exist") is False

    assert _snapshot(store) == before
    assert recorder.removed == []


def test_remove_detaches_and_keeps_other_ids(store, recorder, fields):
    a = store.add(fields(name="Project One"))
    b = store.add(fields(name="Project Two"))
    c = store.add(fields(name="Project Three"))

    assert store.remove(b.id) is True

    assert store.get(b.id) is None
    assert _snapshot(store) == [(a.id, "Project One"), (c.id, "Project Three")]
    assert recorder.removed == [b.id]


def test_removed_name_can_be_reused_with_a_new_id(store, fields):
    old = store.add(fields())
    store.remove(old.id)
    new = store.add(fields())
    assert new.id != old.id


# -----------------------------------------------------------------------------
# update (edit form)
# -----------------------------------------------------------------------------
def test_update_changes_only_given_fields(store, recorder, fields):
    p = store.add(fields())
    store.update(p.id, {"name": "Alpha Plan v2", "progress": 0.5, "status": "paused"})

    assert p.name == "Alpha Plan v2"
    assert p.progress == 0.5
    assert p.status is ProjectStatus.PAUSED
    assert p.cost == 1200.0
    assert recorder.updated == [p]


def test_update_checks_name_against_other_projects(store, fields):
    a = store.add(fields(name="Project One"))
    store.add(fields(name="Project Two"))

    with pytest.raises(DuplicateNameError):
        store.update(a.id, {"name": "Project Two"})
    # 자기 자신의 이름은 그대로 저장 가능
    store.update(a.id, {"name": "Project One"})
    assert a.name == "Project One"


def test_update_is_all_or_nothing(store, fields):
    p = store.add(fields())
    with pytest.raises(ValidationError):
        store.update(p.id, {"description": "changed", "progress": 2})
    assert p.description == "First milestone"
    assert p.progress == 0.25


def test_update_missing_project_raises_not_found(store):
    with pytest.raises(NotFoundError):
        store.update("nope", {"name": "Whatever"})


# -----------------------------------------------------------------------------
# todos
# -----------------------------------------------------------------------------
def test_add_todo_appends_and_status_change_keeps_order(store, recorder, fields):
    p = store.add(fields())
    t1 = store.add_todo(p.id, {"text": "draft", "date": "2024-02-01"})
    t2 = store.add_todo(p.id, {"text": "review", "date": date(2024, 2, 5)})
    t3 = store.add_todo(p.id, {"text": "ship", "date": "2024-02-10"})

    store.set_todo_status(p.id, t1.id, "finished")
    store.set_todo_status(p.id, t2.id, ToDoStatus.IN_PROGRESS)

    assert [t.id for t in p.todo_list] == [t1.id, t2.id, t3.id]
    assert [t.status for t in p.todo_list] == [
        ToDoStatus.FINISHED,
        ToDoStatus.IN_PROGRESS,
        ToDoStatus.PENDING,
    ]
    assert len(recorder.updated) == 5


def test_todo_operations_require_existing_targets(store, fields):
    p = store.add(fields())
    with pytest.raises(NotFoundError):
        store.add_todo("missing", {"text": "x", "date": "2024-01-01"})
    with pytest.raises(NotFoundError):
        store.set_todo_status(p.id, "missing", "finished")
    t = store.add_todo(p.id, {"text": "x", "date": "2024-01-01"})
    with pytest.raises(ValidationError):
        store.set_todo_status(p.id, t.id, "done")


# -----------------------------------------------------------------------------
# seed / hooks
# -----------------------------------------------------------------------------
def test_seed_default_project_once():
    store = ProjectStore(seed_default=True)
    assert [p.name for p in store] == [DEFAULT_PROJECT_NAME]
    assert store.seed_default() is None
    p = store.list()[0]
    assert p.status is ProjectStatus.ACTIVE
    assert p.user_role is UserRole.ENGINEER
    assert p.finish_date == date.today()
    assert (p.cost, p.progress) == (0.0, 0.0)


def test_subscribe_adds_hooks_and_failing_hook_does_not_break_store(store, recorder, fields):
    def boom(_):
        raise RuntimeError("render failed")

    late = []
    store.subscribe(StoreHooks(on_project_created=boom))
    store.subscribe(StoreHooks(on_project_created=late.append))

    p = store.add(fields())

    assert store.get(p.id) is p
    assert recorder.created == [p]
    assert late == [p]
