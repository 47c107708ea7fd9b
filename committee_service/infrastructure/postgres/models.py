#committee_service\infrastructure\postgres\models.py
"""SQLAlchemy ORM models for database tables."""

from sqlalchemy import (
    CheckConstraint, Column, Date, ForeignKey, Index, Integer, String, Text
)

from committee_service.infrastructure.postgres.database import Base


class SenateDivisionORM(Base):
    """Senate division - referenced by faculty and committee slots."""

    __tablename__ = "senate_division"

    senate_division_short_name = Column(String(32), primary_key=True)
    name = Column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<SenateDivisionORM(short_name={self.senate_division_short_name})>"


class CommitteeORM(Base):
    """
    Committee table.

    total_slots is a running aggregate of the committee's slot
    requirements; it is only adjusted by the committee slot repository.
    """

    __tablename__ = "committee"

    committee_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)
    description = Column(Text, nullable=True)
    total_slots = Column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return (
            f"<CommitteeORM(committee_id={self.committee_id}, "
            f"name={self.name}, "
            f"total_slots={self.total_slots})>"
        )


class CommitteeSlotORM(Base):
    """
    Committee slots - seats per senate division within a committee.

    Indexes:
    - Primary key on (committee_id, senate_division_short_name)
    - Index on senate_division_short_name for division lookups
    """

    __tablename__ = "committee_slots"

    committee_id = Column(
        Integer,
        ForeignKey("committee.committee_id"),
        primary_key=True,
    )
    senate_division_short_name = Column(
        String(32),
        ForeignKey("senate_division.senate_division_short_name"),
        primary_key=True,
    )
    slot_requirements = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint("slot_requirements >= 0", name="ck_committee_slots_non_negative"),
        Index("ix_committee_slots_division", "senate_division_short_name"),
    )

    def __repr__(self) -> str:
        return (
            f"<CommitteeSlotORM(committee_id={self.committee_id}, "
            f"division={self.senate_division_short_name}, "
            f"slot_requirements={self.slot_requirements})>"
        )


class DepartmentORM(Base):
    __tablename__ = "department"

    department_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)
    description = Column(Text, nullable=True)


class FacultyORM(Base):
    __tablename__ = "faculty"

    email = Column(String(255), primary_key=True)
    full_name = Column(String(255), nullable=False)
    job_title = Column(String(255), nullable=True)
    phone_num = Column(String(32), nullable=True)
    senate_division_short_name = Column(
        String(32),
        ForeignKey("senate_division.senate_division_short_name"),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<FacultyORM(email={self.email})>"


class DepartmentAssociationORM(Base):
    __tablename__ = "department_associations"

    email = Column(String(255), ForeignKey("faculty.email"), primary_key=True)
    department_id = Column(
        Integer,
        ForeignKey("department.department_id"),
        primary_key=True,
    )


class CommitteeAssignmentORM(Base):
    __tablename__ = "committee_assignment"

    email = Column(String(255), ForeignKey("faculty.email"), primary_key=True)
    committee_id = Column(
        Integer,
        ForeignKey("committee.committee_id"),
        primary_key=True,
    )
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)

    __table_args__ = (
        Index("ix_committee_assignment_committee", "committee_id"),
    )
