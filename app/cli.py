# ./app/cli.py

from __future__ import annotations
from pathlib import Path
from typing import List, Optional

import typer

from app.core.errors import ValidationError
from app.core.fs import export_output_path, read_snapshot, write_snapshot
from app.services.details import project_details
from app.services.projects import ImportReport, ProjectStore

app = typer.Typer(help="Project snapshot (JSON) tools")


def _load(store: ProjectStore, json_path: Path) -> ImportReport:
    text = read_snapshot(json_path)
    if text is None:
        raise typer.BadParameter(f"file not found: {json_path}")
    try:
        return store.import_snapshot(text)
    except ValidationError as e:
        typer.echo(f"{json_path}: {e}", err=True)
        raise typer.Exit(code=1)


def _echo_report(label: str, report: ImportReport) -> None:
    typer.echo(
        f"{label}: created={len(report.created)} updated={len(report.updated)} failed={len(report.failed)}"
    )
    for f in report.failed:
        typer.echo(f"  #{f.index} {f.name!r}: {f.reason.splitlines()[0]}", err=True)


@app.command("show")
def show(json_path: Path):
    """스냅샷 파일 내용을 한 줄씩 출력."""
    store = ProjectStore()
    report = _load(store, json_path)
    for p in store:
        d = project_details(p, ["initials", "status", "progress"])
        typer.echo(
            f"[{d['initials']}] {p.name} | {d['status']} | {d['progress']} | todos={len(p.todo_list)}"
        )
    if report.failed:
        _echo_report(str(json_path), report)


@app.command("merge")
def merge(
    json_paths: List[Path],
    output: Optional[Path] = typer.Option(None, "--output", "-o"),
    seed: bool = typer.Option(False, "--seed/--no-seed", help="Start from the default project"),
    pretty: bool = True,
):
    """파일들을 순서대로 하나의 스토어에 import 후 export."""
    store = ProjectStore(seed_default=seed)
    for json_path in json_paths:
        _echo_report(str(json_path), _load(store, json_path))
    out = write_snapshot(output or export_output_path(), store.export_snapshot(indent=2 if pretty else None))
    typer.echo(f"wrote {len(store)} project(s) -> {out}")

if __name__ == "__main__":
    app()
