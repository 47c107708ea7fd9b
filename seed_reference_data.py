# seed_reference_data.py
"""Seed database with senate divisions and departments."""

from committee_service.infrastructure.postgres.database import get_db_session
from committee_service.infrastructure.postgres.models import DepartmentORM, SenateDivisionORM


SENATE_DIVISIONS = {
    "AO": "All Other Units",
    "BA": "School of Business",
    "ED": "College of Education",
    "LAS": "Liberal Arts and Sciences",
    "MCECS": "Engineering and Computer Science",
}

DEPARTMENTS = [
    ("Computer Science", "Department of Computer Science"),
    ("Mathematics", "Fariborz Maseeh Department of Mathematics and Statistics"),
    ("History", "Department of History"),
]


def seed(session) -> tuple:
    """Insert any missing reference rows; returns (divisions_added, departments_added)."""
    divisions_added = 0
    for short_name, name in SENATE_DIVISIONS.items():
        if session.get(SenateDivisionORM, short_name) is None:
            session.add(SenateDivisionORM(senate_division_short_name=short_name, name=name))
            divisions_added += 1

    existing = {d.name for d in session.query(DepartmentORM).all()}
    departments_added = 0
    for name, description in DEPARTMENTS:
        if name not in existing:
            session.add(DepartmentORM(name=name, description=description))
            departments_added += 1

    return divisions_added, departments_added


def main():
    print("🌱 Seeding reference data...")
    print()

    with get_db_session() as session:
        divisions_added, departments_added = seed(session)

    print(f"✅ Senate divisions added: {divisions_added}")
    print(f"✅ Departments added: {departments_added}")
    print()
    print("🎉 Reference data seeding complete!")


if __name__ == "__main__":
    main()
