"""Test reference data seeding."""

from sqlalchemy import func, select

from committee_service.infrastructure.postgres.database import get_db_session
from committee_service.infrastructure.postgres.models import DepartmentORM, SenateDivisionORM
from seed_reference_data import DEPARTMENTS, SENATE_DIVISIONS, seed


def test_seed_is_idempotent(test_session_factory):
    with get_db_session(test_session_factory) as session:
        first = seed(session)

    with get_db_session(test_session_factory) as session:
        second = seed(session)
        division_count = session.scalar(select(func.count()).select_from(SenateDivisionORM))
        department_count = session.scalar(select(func.count()).select_from(DepartmentORM))

    assert first == (len(SENATE_DIVISIONS), len(DEPARTMENTS))
    assert second == (0, 0)
    assert division_count == len(SENATE_DIVISIONS)
    assert department_count == len(DEPARTMENTS)
