# tests/test_details.py
from __future__ import annotations

from datetime import date

from app.models.project import create_project
from app.services.details import DETAIL_FIELDS, project_details


def test_details_format_every_field(fields):
    p = create_project(fields(cost=500, progress=0.5, finish_date=date(2024, 5, 1)))

    assert project_details(p) == {
        "name": "Alpha Plan",
        "description": "First milestone",
        "status": "Active",
        "userRole": "Manager",
        "cost": "$500",
        "progress": "50%",
        "finishDate": "05/01/2024",
        "initials": "AP",
    }


def test_details_subset_ignores_unknown_keys(fields):
    p = create_project(fields(progress=0.333))
    assert project_details(p, ["progress", "ui", "__class__"]) == {"progress": "33.3%"}


def test_progress_is_stored_as_fraction(fields):
    p = create_project(fields(progress=0.75))
    assert p.progress == 0.75
    assert DETAIL_FIELDS["progress"](p) == "75%"
