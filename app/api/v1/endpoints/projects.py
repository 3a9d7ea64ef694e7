# app/api/v1/endpoints/projects.py
from __future__ import annotations

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from loguru import logger

from app.core.config import settings
from app.core.errors import ValidationError
from app.core.state import get_store
from app.schemas.project import (
    ImportFailureOut,
    ImportReportOut,
    ProjectIn,
    ProjectOut,
    ProjectUpdate,
    ToDoIn,
    ToDoOut,
    ToDoStatusIn,
)
from app.services.details import project_details
from app.services.projects import ImportReport, ProjectStore

router = APIRouter(tags=["projects"])


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------
def _report_out(report: ImportReport) -> ImportReportOut:
    return ImportReportOut(
        created=report.created,
        updated=report.updated,
        failed=[
            ImportFailureOut(index=f.index, name=f.name, reason=f.reason)
            for f in report.failed
        ],
    )


def _get_or_404(store: ProjectStore, project_id: str):
    project = store.get(project_id)
    if project is None:
        raise HTTPException(status_code=404, detail=f"Project not found: {project_id}")
    return project


# -----------------------------------------------------------------------------
# Export / Import
# -----------------------------------------------------------------------------
@router.get("/projects:export")
def export_projects(
    file_name: Optional[str] = Query(default=None),
    store: ProjectStore = Depends(get_store),
) -> Response:
    name = file_name or settings.EXPORT_FILE_NAME
    return Response(
        content=store.export_snapshot(),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{name}"'},
    )


@router.post("/projects:import", response_model=ImportReportOut)
async def import_projects(
    request: Request,
    store: ProjectStore = Depends(get_store),
) -> ImportReportOut:
    raw = await request.body()
    # 파일 선택 안 함 = no-op
    if not raw.strip():
        return ImportReportOut()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValidationError(f"Snapshot is not valid UTF-8: {exc}") from exc
    report = store.import_snapshot(text)
    if report.failed:
        logger.warning("Import via API: {} candidate(s) failed", len(report.failed))
    return _report_out(report)


# -----------------------------------------------------------------------------
# Projects
# -----------------------------------------------------------------------------
@router.get("/projects", response_model=List[ProjectOut])
def list_projects(store: ProjectStore = Depends(get_store)):
    return [ProjectOut.from_entity(p) for p in store]


@router.post("/projects", response_model=ProjectOut, status_code=201)
def create_project(payload: ProjectIn, store: ProjectStore = Depends(get_store)):
    return ProjectOut.from_entity(store.add(payload))


@router.get("/projects/{project_id}", response_model=ProjectOut)
def get_project(project_id: str, store: ProjectStore = Depends(get_store)):
    return ProjectOut.from_entity(_get_or_404(store, project_id))


@router.patch("/projects/{project_id}", response_model=ProjectOut)
def update_project(
    project_id: str,
    payload: ProjectUpdate,
    store: ProjectStore = Depends(get_store),
):
    return ProjectOut.from_entity(store.update(project_id, payload))


@router.delete("/projects/{project_id}", status_code=204)
def delete_project(project_id: str, store: ProjectStore = Depends(get_store)) -> Response:
    store.remove(project_id)
    return Response(status_code=204)


@router.get("/projects/{project_id}/details", response_model=Dict[str, str])
def get_project_details(
    project_id: str,
    keys: Optional[List[str]] = Query(default=None),
    store: ProjectStore = Depends(get_store),
):
    return project_details(_get_or_404(store, project_id), keys)


# -----------------------------------------------------------------------------
# ToDos
# -----------------------------------------------------------------------------
@router.post("/projects/{project_id}/todos", response_model=ToDoOut, status_code=201)
def add_todo(
    project_id: str,
    payload: ToDoIn,
    store: ProjectStore = Depends(get_store),
):
    todo = store.add_todo(project_id, payload)
    return ToDoOut(id=todo.id, text=todo.text, date=todo.date, status=todo.status)


@router.patch("/projects/{project_id}/todos/{todo_id}", response_model=ToDoOut)
def set_todo_status(
    project_id: str,
    todo_id: str,
    payload: ToDoStatusIn,
    store: ProjectStore = Depends(get_store),
):
    todo = store.set_todo_status(project_id, todo_id, payload.status)
    return ToDoOut(id=todo.id, text=todo.text, date=todo.date, status=todo.status)
