"""Shared fixtures: spreadsheet builders and an app wired to a temp directory."""

from collections.abc import Callable
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from openpyxl import Workbook

from app.core.database import AttendeeDirectory, get_directory
from app.main import app as registration_app

HEADERS = ["Name", "Department", "SAP ID", "Table No"]

ROWS = [
    ["satish", "Technology", "50012345", 1],
    ["nithin", "EHS", "50012347", 2],
    ["JOHN smith", "Operations", "50012360", "Team 7"],
    ["priya", "Admin", "50012361", "Host - Main Stage"],
    ["karthik", "HR", "50012362", "Coordinator"],
    ["vijay", None, 50012363, 5],
]


def write_workbook(path: Path, rows: list[list], headers: list[str] = HEADERS) -> Path:
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = "Attendees"
    worksheet.append(headers)
    for row in rows:
        worksheet.append(row)
    workbook.save(path)
    return path


@pytest.fixture
def make_workbook(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing an xlsx file under tmp_path."""

    def _make(rows: list[list] = ROWS, headers: list[str] = HEADERS, name: str = "database.xlsx") -> Path:
        return write_workbook(tmp_path / name, rows, headers)

    return _make


@pytest.fixture
def database_file(make_workbook) -> Path:
    return make_workbook()


@pytest.fixture
def directory(database_file: Path) -> AttendeeDirectory:
    directory = AttendeeDirectory(str(database_file), seed_sample=False)
    directory.load()
    return directory


@pytest.fixture
def app(directory: AttendeeDirectory) -> FastAPI:
    registration_app.dependency_overrides[get_directory] = lambda: directory
    yield registration_app
    registration_app.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
