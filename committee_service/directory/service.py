#committee_service\directory\service.py

"""Directory services - committees, divisions, departments, faculty."""

import logging
from datetime import date
from typing import List, Optional

from committee_service.core.errors import GovernanceValidationError
from committee_service.core.models import (
    Committee,
    CommitteeAssignment,
    Department,
    DepartmentFaculty,
    Faculty,
    FacultyDepartments,
    SenateDivision,
    WriteResult,
)
from committee_service.core.validation import validate_slot_count
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

logger = logging.getLogger(__name__)


class CommitteeService:
    """Committees and the reference tables around them."""

    def __init__(
        self,
        committee_repo: CommitteeRepository,
        division_repo: SenateDivisionRepository,
        department_repo: DepartmentRepository,
    ):
        self._committee_repo = committee_repo
        self._division_repo = division_repo
        self._department_repo = department_repo

    # ============================================
    # COMMITTEES
    # ============================================

    def create_committee(
        self,
        name: str,
        description: Optional[str],
        total_slots: int,
    ) -> int:
        """Register a committee with an initial seat total."""
        if not name or not name.strip():
            raise GovernanceValidationError("name required")
        validate_slot_count(total_slots, "total_slots")

        committee_id = self._committee_repo.create(
            Committee(committee_id=None, name=name, description=description, total_slots=total_slots)
        )
        logger.info(f"[committee_service] created committee {committee_id} ({name})")
        return committee_id

    def get_committee(self, committee_id: int) -> Optional[Committee]:
        return self._committee_repo.get(committee_id)

    def list_committees(self) -> List[Committee]:
        return self._committee_repo.list_all()

    def update_committee(
        self,
        committee_id: int,
        name: str,
        description: Optional[str],
        total_slots: int,
    ) -> WriteResult:
        """
        Update a committee.

        Raises BusinessRuleViolation when total_slots would fall below the
        seats already required by the committee's slots.
        """
        if not name or not name.strip():
            raise GovernanceValidationError("name required")
        validate_slot_count(total_slots, "total_slots")

        return self._committee_repo.update(
            Committee(
                committee_id=committee_id,
                name=name,
                description=description,
                total_slots=total_slots,
            )
        )

    # ============================================
    # REFERENCE DATA
    # ============================================

    def get_senate_division(self, short_name: str) -> Optional[SenateDivision]:
        return self._division_repo.get(short_name)

    def list_senate_divisions(self) -> List[SenateDivision]:
        return self._division_repo.list_all()

    def get_department(self, department_id: int) -> Optional[Department]:
        return self._department_repo.get(department_id)

    def list_departments(self) -> List[Department]:
        return self._department_repo.list_all()


class FacultyService:
    """Faculty members, their departments and committee seats."""

    def __init__(
        self,
        faculty_repo: FacultyRepository,
        association_repo: DepartmentAssociationRepository,
        assignment_repo: CommitteeAssignmentRepository,
    ):
        self._faculty_repo = faculty_repo
        self._association_repo = association_repo
        self._assignment_repo = assignment_repo

    # ============================================
    # FACULTY
    # ============================================

    def add_faculty(self, faculty: Faculty, department_ids: Optional[List[int]] = None) -> str:
        """Add a faculty member, with department associations when given."""
        if not faculty.email or "@" not in faculty.email:
            raise GovernanceValidationError("valid email required")
        if not faculty.full_name:
            raise GovernanceValidationError("full_name required")

        return self._faculty_repo.create(faculty, department_ids)

    def get_faculty(self, email: str) -> Optional[Faculty]:
        return self._faculty_repo.get(email)

    def list_faculty(self) -> List[Faculty]:
        return self._faculty_repo.list_all()

    def update_faculty(self, faculty: Faculty, department_ids: Optional[List[int]] = None) -> WriteResult:
        if not faculty.full_name:
            raise GovernanceValidationError("full_name required")

        return self._faculty_repo.update(faculty, department_ids)

    # ============================================
    # DEPARTMENT ASSOCIATIONS
    # ============================================

    def faculty_in_department(self, department_id: int) -> Optional[DepartmentFaculty]:
        return self._association_repo.by_department(department_id)

    def departments_of_faculty(self, email: str) -> Optional[FacultyDepartments]:
        return self._association_repo.by_faculty(email)

    def move_department_association(
        self,
        email: str,
        old_department_id: int,
        new_department_id: int,
    ) -> WriteResult:
        return self._association_repo.reassign(email, old_department_id, new_department_id)

    # ============================================
    # COMMITTEE ASSIGNMENTS
    # ============================================

    def assign_to_committee(
        self,
        email: str,
        committee_id: int,
        start_date: date,
        end_date: date,
    ) -> str:
        """Seat a faculty member on a committee for a term."""
        self._check_term(start_date, end_date)
        return self._assignment_repo.create(
            CommitteeAssignment(
                email=email,
                committee_id=committee_id,
                start_date=start_date,
                end_date=end_date,
            )
        )

    def assignments_for_committee(self, committee_id: int) -> List[CommitteeAssignment]:
        return self._assignment_repo.list_by_committee(committee_id)

    def assignments_for_faculty(self, email: str) -> List[CommitteeAssignment]:
        return self._assignment_repo.list_by_faculty(email)

    def update_assignment(
        self,
        email: str,
        committee_id: int,
        start_date: date,
        end_date: date,
    ) -> WriteResult:
        self._check_term(start_date, end_date)
        return self._assignment_repo.update(
            CommitteeAssignment(
                email=email,
                committee_id=committee_id,
                start_date=start_date,
                end_date=end_date,
            )
        )

    def remove_assignment(self, committee_id: int, email: str) -> WriteResult:
        return self._assignment_repo.delete(committee_id, email)

    def _check_term(self, start_date: date, end_date: date) -> None:
        if end_date < start_date:
            raise GovernanceValidationError("end_date must not be before start_date")
