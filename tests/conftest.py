"""
Shared pytest fixtures.

Each test gets its own SQLite file with foreign keys enforced. The FastAPI
app is wired to it through a ``get_db`` override, so HTTP tests and direct
service tests see the same data.
"""

import os

# Must be set before the application settings are first imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["JWT_EXPIRY"] = "1"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import date
from typing import Callable, Dict, Generator, Iterable, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from admin_dashboard.auth import get_password_hash, get_token_codec
from admin_dashboard.database import Base, build_engine, get_db
from admin_dashboard.main import app
from admin_dashboard.models import Division, Position, Role, User, UserRole
from admin_dashboard.tokens import Identity


@pytest.fixture
def session_factory(tmp_path) -> Generator[sessionmaker, None, None]:
    test_engine = build_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(bind=test_engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def db(session_factory) -> Generator[Session, None, None]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory) -> Generator[TestClient, None, None]:
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_role(db) -> Callable[..., Role]:
    def _make_role(name: str, level: int = 1, is_active: bool = True) -> Role:
        role = Role(name=name, level=level, is_active=is_active, created_by="seed")
        db.add(role)
        db.commit()
        db.refresh(role)
        return role

    return _make_role


@pytest.fixture
def make_division(db) -> Callable[..., Division]:
    def _make_division(code: str, name: Optional[str] = None) -> Division:
        division = Division(code=code, name=name or code.title(), created_by="seed")
        db.add(division)
        db.commit()
        db.refresh(division)
        return division

    return _make_division


@pytest.fixture
def make_position(db) -> Callable[..., Position]:
    def _make_position(code: str, name: Optional[str] = None) -> Position:
        position = Position(code=code, name=name or code.title(), created_by="seed")
        db.add(position)
        db.commit()
        db.refresh(position)
        return position

    return _make_position


@pytest.fixture
def make_user(db) -> Callable[..., User]:
    """Insert a user directly, bypassing the service layer."""
    counter = {"n": 0}

    def _make_user(
        email: str,
        password: str = "secret1",
        roles: Iterable[Role] = (),
        is_active: bool = True,
        employee_id: Optional[str] = None,
        name: str = "Test User",
        join_date: date = date(2024, 1, 15),
        **fields,
    ) -> User:
        counter["n"] += 1
        user = User(
            employee_id=employee_id or f"EMP{counter['n']:03d}",
            name=name,
            email=email,
            password=get_password_hash(password),
            join_date=join_date,
            is_active=is_active,
            created_by="seed",
            **fields,
        )
        db.add(user)
        db.flush()
        for role in roles:
            db.add(UserRole(user_id=user.id, role_id=role.id, created_by="seed"))
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def admin_role(make_role) -> Role:
    return make_role("admin", level=100)


@pytest.fixture
def admin_user(make_user, admin_role) -> User:
    return make_user("a@x.com", password="secret1", roles=[admin_role], name="Alice Admin")


def bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def token_for(user: User, roles: Iterable[str]) -> str:
    return get_token_codec().issue(
        Identity(
            user_id=user.id,
            external_id=user.uid,
            employee_id=user.employee_id,
            email=user.email,
            roles=tuple(roles),
        )
    )


@pytest.fixture
def admin_headers(admin_user) -> Dict[str, str]:
    return bearer(token_for(admin_user, ["admin"]))


@pytest.fixture
def viewer_headers(make_user, make_role) -> Dict[str, str]:
    viewer_role = make_role("viewer", level=1)
    viewer = make_user("viewer@x.com", roles=[viewer_role], name="Victor Viewer")
    return bearer(token_for(viewer, ["viewer"]))


@pytest.fixture
def headers_for() -> Callable[[User, Iterable[str]], Dict[str, str]]:
    """Build an Authorization header for a seeded user with the given role names."""
    def _headers_for(user: User, roles: Iterable[str]) -> Dict[str, str]:
        return bearer(token_for(user, roles))

    return _headers_for
