"""
Pytest configuration and fixtures
"""
import json
import sys
from pathlib import Path

import pytest

# backend modules import each other as top-level modules (app, database, routes...)
project_root = Path(__file__).parent.parent
for path in (project_root, project_root / "backend"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

STUDENTS = [
    {
        "roll_no": "CS101",
        "name": "Asha Verma",
        "email": "a@x.com",
        "section": "A",
        "gender": "Female",
        "password": "should-never-leak",
    },
    {
        "roll_no": "CS102",
        "name": "Ravi Kumar",
        "email": "Ravi.Kumar@Example.com",
        "section": "B",
        "gender": "Male",
    },
]

MARKS = [
    {
        "Roll No": "CS101",
        "Subjects": {
            "Physics": {"Mid 1": "30", "Mid 2": "40", "Average": "35"},
        },
    },
]


def write_json(path, data):
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


def read_json(path):
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture
def students_file(tmp_path):
    return write_json(tmp_path / "students.json", STUDENTS)


@pytest.fixture
def marks_file(tmp_path):
    return write_json(tmp_path / "student_marks.json", MARKS)


@pytest.fixture
def app(students_file, marks_file, tmp_path):
    from app import create_app

    return create_app({
        "TESTING": True,
        "STUDENTS_FILE": str(students_file),
        "MARKS_FILE": str(marks_file),
    })


@pytest.fixture
def client(app):
    return app.test_client()
