from __future__ import annotations

from datetime import datetime
from types import SimpleNamespace
from typing import Callable, Iterator

import pytest
from flask import Flask
from jose import jwt

from supervision import create_app
from supervision.extensions import db
from supervision.models import (
    Faculty,
    Lecturer,
    Student,
    StudyProgram,
    Thesis,
    ThesisProgress,
    User,
    UserRole,
)

JWT_SECRET = "testing-jwt-secret"

START = datetime(2024, 1, 10, 9, 0)
END = datetime(2024, 1, 10, 10, 0)
PROPOSED = datetime(2024, 1, 5, 8, 30)


def make_token(user_id: str | None, secret: str = JWT_SECRET, **claims) -> str:
    payload = dict(claims)
    if user_id is not None:
        payload["user_id"] = user_id
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture()
def app() -> Iterator[Flask]:
    app = create_app("testing")
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app: Flask):
    return app.test_client()


@pytest.fixture()
def ctx(app: Flask) -> Iterator[None]:
    """Application context for tests calling services and repositories directly."""
    with app.app_context():
        yield


@pytest.fixture()
def seed(app: Flask) -> SimpleNamespace:
    """
    Two students, three lecturers.

    Thesis A (student Dewi) is supervised by Ani (primary) and Budi (secondary).
    Thesis B (student Eko) is supervised by Citra only.
    """
    with app.app_context():
        faculty = Faculty(name="Faculty of Intelligent Electrical and Informatics Technology")
        program = StudyProgram(name="Informatics", faculty=faculty)

        ani = Lecturer(nip="198001012005011001", name="Dr. Ani", study_program=program)
        budi = Lecturer(nip="198202022006022002", name="Dr. Budi", study_program=program)
        citra = Lecturer(nip="197903032004031003", name="Dr. Citra", study_program=program)
        dewi = Student(nim="5025201001", name="Dewi", study_program=program)
        eko = Student(nim="5025201002", name="Eko", study_program=program)

        users = {
            "ani": User(identifier=ani.nip, role=UserRole.PRIMARY_LECTURER, lecturer=ani),
            "budi": User(identifier=budi.nip, role=UserRole.SECONDARY_LECTURER, lecturer=budi),
            "citra": User(identifier=citra.nip, role=UserRole.LECTURER, lecturer=citra),
            "dewi": User(identifier=dewi.nim, role=UserRole.STUDENT, student=dewi),
            "eko": User(identifier=eko.nim, role=UserRole.STUDENT, student=eko),
        }

        thesis_a = Thesis(title="Thesis A", description="About scheduling",
                          progress=ThesisProgress.BAB1, student=dewi)
        thesis_a.add_supervisor(ani, UserRole.PRIMARY_LECTURER)
        thesis_a.add_supervisor(budi, UserRole.SECONDARY_LECTURER)

        thesis_b = Thesis(title="Thesis B", progress=ThesisProgress.BAB3, student=eko)
        thesis_b.add_supervisor(citra, UserRole.PRIMARY_LECTURER)

        db.session.add_all([faculty, program, thesis_a, thesis_b, *users.values()])
        db.session.commit()

        return SimpleNamespace(
            dewi=users["dewi"].id,
            eko=users["eko"].id,
            ani=users["ani"].id,
            budi=users["budi"].id,
            citra=users["citra"].id,
            dewi_student=dewi.id,
            eko_student=eko.id,
            ani_lecturer=ani.id,
            budi_lecturer=budi.id,
            citra_lecturer=citra.id,
            ani_nip=ani.nip,
            dewi_nim=dewi.nim,
            thesis_a=thesis_a.id,
            thesis_b=thesis_b.id,
        )


@pytest.fixture()
def auth_headers() -> Callable[[str], dict]:
    def _headers(user_id: str) -> dict:
        return {"Authorization": f"Bearer {make_token(user_id)}"}

    return _headers


@pytest.fixture()
def load_user(ctx) -> Callable[[str], User]:
    def _load(user_id: str) -> User:
        return db.session.get(User, user_id)

    return _load


@pytest.fixture()
def schedule_fields() -> dict:
    return {
        "proposed_at": PROPOSED,
        "start_time": START,
        "end_time": END,
        "description": "Review chapter 1",
        "location": "Room 101",
    }
