#tests\conftest.py

"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event, select
from sqlalchemy.pool import StaticPool

from committee_service.api import container
from committee_service.api.main import app
from committee_service.core.service import SlotAccountingService
from committee_service.directory.service import CommitteeService, FacultyService
from committee_service.infrastructure.postgres.database import (
    Base,
    drop_db,
    get_session_factory,
    init_db,
)
from committee_service.infrastructure.postgres.directory_repository import (
    CommitteeRepository,
    DepartmentRepository,
    SenateDivisionRepository,
)
from committee_service.infrastructure.postgres.faculty_repository import (
    CommitteeAssignmentRepository,
    DepartmentAssociationRepository,
    FacultyRepository,
)
from committee_service.infrastructure.postgres.models import (
    CommitteeORM,
    CommitteeSlotORM,
    DepartmentORM,
    SenateDivisionORM,
)
from committee_service.infrastructure.postgres.slot_repository import (
    PostgresCommitteeSlotRepository,
)


@pytest.fixture(scope="session")
def test_engine():
    """In-memory SQLite engine with foreign keys enforced."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def enable_foreign_keys(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    # Create all tables
    init_db(engine)

    yield engine

    # Cleanup
    drop_db(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_session_factory(test_engine):
    """Create session factory for tests."""
    return get_session_factory(test_engine)


@pytest.fixture(autouse=True)
def clean_database(test_engine):
    """Clean database after each test."""
    yield
    with test_engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())


@pytest.fixture
def seeded(test_session_factory):
    """
    Reference rows used across tests.

    Committee 1 starts with total_slots=20 and no slots; committee 2 with 0.
    """
    session = test_session_factory()
    try:
        session.add_all([
            SenateDivisionORM(senate_division_short_name="AO", name="All Other Units"),
            SenateDivisionORM(senate_division_short_name="BQ", name="School of Business"),
            SenateDivisionORM(senate_division_short_name="LAS", name="Liberal Arts and Sciences"),
            CommitteeORM(committee_id=1, name="Committee on Committees", description="CoC", total_slots=20),
            CommitteeORM(committee_id=2, name="Budget Committee", description="Budget", total_slots=0),
            DepartmentORM(department_id=1, name="Computer Science", description="CS"),
            DepartmentORM(department_id=2, name="Mathematics", description="Math"),
        ])
        session.commit()
    finally:
        session.close()


@pytest.fixture
def total_slots(test_session_factory):
    """Read a committee's total_slots straight from the table."""
    def _read(committee_id: int) -> int:
        session = test_session_factory()
        try:
            return session.scalar(
                select(CommitteeORM.total_slots).where(CommitteeORM.committee_id == committee_id)
            )
        finally:
            session.close()
    return _read


@pytest.fixture
def slot_rows(test_session_factory):
    """Read all committee_slots rows as {(committee_id, division): requirements}."""
    def _read() -> dict:
        session = test_session_factory()
        try:
            return {
                (row.committee_id, row.senate_division_short_name): row.slot_requirements
                for row in session.scalars(select(CommitteeSlotORM)).all()
            }
        finally:
            session.close()
    return _read


@pytest.fixture
def slot_repository(test_session_factory):
    """Create repository with test database session factory."""
    return PostgresCommitteeSlotRepository(session_factory=test_session_factory)


@pytest.fixture
def slot_service(slot_repository):
    return SlotAccountingService(slot_repository)


@pytest.fixture
def committee_service(test_session_factory):
    return CommitteeService(
        committee_repo=CommitteeRepository(test_session_factory),
        division_repo=SenateDivisionRepository(test_session_factory),
        department_repo=DepartmentRepository(test_session_factory),
    )


@pytest.fixture
def faculty_service(test_session_factory):
    return FacultyService(
        faculty_repo=FacultyRepository(test_session_factory),
        association_repo=DepartmentAssociationRepository(test_session_factory),
        assignment_repo=CommitteeAssignmentRepository(test_session_factory),
    )


@pytest.fixture
def client(slot_service, committee_service, faculty_service):
    """API client wired to the test database."""
    app.dependency_overrides[container.get_slot_service] = lambda: slot_service
    app.dependency_overrides[container.get_committee_service] = lambda: committee_service
    app.dependency_overrides[container.get_faculty_service] = lambda: faculty_service

    yield TestClient(app)

    app.dependency_overrides.clear()
