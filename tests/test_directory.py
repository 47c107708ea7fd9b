"""Test committees, faculty, department associations and assignments."""

from datetime import date

import pytest

from committee_service.core.errors import (
    BusinessRuleViolation,
    ForeignKeyViolation,
    GovernanceValidationError,
    UniqueConstraintViolation,
)
from committee_service.core.models import CommitteeSlot, Faculty


pytestmark = pytest.mark.usefixtures("seeded")


# ============================================
# COMMITTEES
# ============================================

class TestCommittees:

    def test_create_and_get(self, committee_service):
        committee_id = committee_service.create_committee("Library Committee", "Books", 6)

        committee = committee_service.get_committee(committee_id)
        assert committee.name == "Library Committee"
        assert committee.total_slots == 6

    def test_list_ordered_by_name(self, committee_service):
        names = [c.name for c in committee_service.list_committees()]
        assert names == ["Budget Committee", "Committee on Committees"]

    def test_duplicate_name(self, committee_service):
        with pytest.raises(UniqueConstraintViolation):
            committee_service.create_committee("Budget Committee", None, 0)

    def test_create_requires_name(self, committee_service):
        with pytest.raises(GovernanceValidationError):
            committee_service.create_committee("  ", None, 0)

    def test_update(self, committee_service):
        result = committee_service.update_committee(2, "Budget and Planning", "B&P", 4)

        assert result.found
        committee = committee_service.get_committee(2)
        assert committee.name == "Budget and Planning"
        assert committee.total_slots == 4

    def test_update_missing(self, committee_service):
        result = committee_service.update_committee(999, "Nobody", None, 0)
        assert not result.found

    def test_total_cannot_drop_below_slot_requirements(
        self, committee_service, slot_repository, total_slots
    ):
        slot_repository.create(CommitteeSlot(2, "AO", 3))
        slot_repository.create(CommitteeSlot(2, "BQ", 2))

        with pytest.raises(BusinessRuleViolation):
            committee_service.update_committee(2, "Budget Committee", None, 4)

        assert total_slots(2) == 5

        committee_service.update_committee(2, "Budget Committee", None, 5)
        assert total_slots(2) == 5

    def test_direct_total_is_base_for_slot_changes(
        self, committee_service, slot_repository, total_slots
    ):
        slot_repository.create(CommitteeSlot(2, "AO", 3))
        committee_service.update_committee(2, "Budget Committee", None, 10)

        slot_repository.create(CommitteeSlot(2, "BQ", 2))
        slot_repository.update_requirements(2, "AO", 1)

        assert total_slots(2) == 10
        with pytest.raises(BusinessRuleViolation):
            committee_service.update_committee(2, "Budget Committee", None, 2)

    def test_reference_data(self, committee_service):
        assert [d.senate_division_short_name for d in committee_service.list_senate_divisions()] == [
            "AO", "BQ", "LAS",
        ]
        assert committee_service.get_senate_division("BQ").name == "School of Business"
        assert committee_service.get_senate_division("ZZ") is None
        assert committee_service.get_department(2).name == "Mathematics"
        assert len(committee_service.list_departments()) == 2


# ============================================
# FACULTY
# ============================================

def _faculty(email="ada@pdx.edu", division="LAS"):
    return Faculty(
        email=email,
        full_name="Ada Lovelace",
        senate_division_short_name=division,
        job_title="Professor",
        phone_num="503-555-0100",
    )


class TestFaculty:

    def test_add_with_departments(self, faculty_service):
        faculty_service.add_faculty(_faculty(), [1, 2])

        assert faculty_service.get_faculty("ada@pdx.edu").job_title == "Professor"
        assert faculty_service.departments_of_faculty("ada@pdx.edu").department_ids == [1, 2]
        assert faculty_service.faculty_in_department(1).emails == ["ada@pdx.edu"]

    def test_unknown_department_rolls_back_member(self, faculty_service):
        with pytest.raises(ForeignKeyViolation):
            faculty_service.add_faculty(_faculty(), [1, 99])

        assert faculty_service.get_faculty("ada@pdx.edu") is None

    def test_unknown_division(self, faculty_service):
        with pytest.raises(ForeignKeyViolation):
            faculty_service.add_faculty(_faculty(division="ZZ"))

    def test_invalid_email(self, faculty_service):
        with pytest.raises(GovernanceValidationError):
            faculty_service.add_faculty(_faculty(email="not-an-email"))

    def test_update_replaces_departments(self, faculty_service):
        faculty_service.add_faculty(_faculty(), [1])

        updated = _faculty()
        updated.job_title = "Chair"
        result = faculty_service.update_faculty(updated, [2])

        assert result.found
        assert faculty_service.get_faculty("ada@pdx.edu").job_title == "Chair"
        assert faculty_service.departments_of_faculty("ada@pdx.edu").department_ids == [2]

    def test_update_without_departments_keeps_them(self, faculty_service):
        faculty_service.add_faculty(_faculty(), [1])

        faculty_service.update_faculty(_faculty(), None)

        assert faculty_service.departments_of_faculty("ada@pdx.edu").department_ids == [1]

    def test_update_missing(self, faculty_service):
        result = faculty_service.update_faculty(_faculty(email="ghost@pdx.edu"), [1])

        assert not result.found
        assert faculty_service.departments_of_faculty("ghost@pdx.edu") is None

    def test_move_department_association(self, faculty_service):
        faculty_service.add_faculty(_faculty(), [1])

        assert faculty_service.move_department_association("ada@pdx.edu", 1, 2).found
        assert not faculty_service.move_department_association("ada@pdx.edu", 1, 2).found
        assert faculty_service.faculty_in_department(1) is None


# ============================================
# COMMITTEE ASSIGNMENTS
# ============================================

class TestCommitteeAssignments:

    def test_assign_and_list(self, faculty_service):
        faculty_service.add_faculty(_faculty())
        faculty_service.assign_to_committee("ada@pdx.edu", 1, date(2024, 9, 1), date(2026, 6, 30))

        by_committee = faculty_service.assignments_for_committee(1)
        by_faculty = faculty_service.assignments_for_faculty("ada@pdx.edu")

        assert [a.email for a in by_committee] == ["ada@pdx.edu"]
        assert by_faculty[0].end_date == date(2026, 6, 30)

    def test_end_before_start(self, faculty_service):
        faculty_service.add_faculty(_faculty())

        with pytest.raises(GovernanceValidationError):
            faculty_service.assign_to_committee("ada@pdx.edu", 1, date(2025, 1, 1), date(2024, 1, 1))

    def test_unknown_committee(self, faculty_service):
        faculty_service.add_faculty(_faculty())

        with pytest.raises(ForeignKeyViolation):
            faculty_service.assign_to_committee("ada@pdx.edu", 999, date(2024, 9, 1), date(2025, 6, 30))

    def test_duplicate_assignment(self, faculty_service):
        faculty_service.add_faculty(_faculty())
        faculty_service.assign_to_committee("ada@pdx.edu", 1, date(2024, 9, 1), date(2025, 6, 30))

        with pytest.raises(UniqueConstraintViolation):
            faculty_service.assign_to_committee("ada@pdx.edu", 1, date(2025, 9, 1), date(2026, 6, 30))

    def test_update_and_remove(self, faculty_service):
        faculty_service.add_faculty(_faculty())
        faculty_service.assign_to_committee("ada@pdx.edu", 1, date(2024, 9, 1), date(2025, 6, 30))

        assert faculty_service.update_assignment(
            "ada@pdx.edu", 1, date(2024, 9, 1), date(2027, 6, 30)
        ).found
        assert faculty_service.remove_assignment(1, "ada@pdx.edu").row_count == 1
        assert faculty_service.remove_assignment(1, "ada@pdx.edu").row_count == 0
        assert faculty_service.assignments_for_faculty("ada@pdx.edu") == []
