#committee_service\api\container.py
"""Dependency injection container - wires repositories into services."""

from committee_service.core.service import SlotAccountingService
from committee_service.directory.service import CommitteeService, FacultyService
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
from committee_service.infrastructure.postgres.slot_repository import (
    PostgresCommitteeSlotRepository,
)


# Singletons; repositories open the shared engine on first query
_slot_service = SlotAccountingService(PostgresCommitteeSlotRepository())

_committee_service = CommitteeService(
    committee_repo=CommitteeRepository(),
    division_repo=SenateDivisionRepository(),
    department_repo=DepartmentRepository(),
)

_faculty_service = FacultyService(
    faculty_repo=FacultyRepository(),
    association_repo=DepartmentAssociationRepository(),
    assignment_repo=CommitteeAssignmentRepository(),
)


def get_slot_service() -> SlotAccountingService:
    return _slot_service


def get_committee_service() -> CommitteeService:
    return _committee_service


def get_faculty_service() -> FacultyService:
    return _faculty_service
