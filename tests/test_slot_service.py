"""Test SlotAccountingService against the in-memory repository."""

import pytest

from committee_service.core.errors import (
    ForeignKeyViolation,
    GovernanceValidationError,
    ResourceNotFound,
    UniqueConstraintViolation,
)
from committee_service.core.models import SlotKey
from committee_service.core.service import SlotAccountingService
from committee_service.infrastructure.memory.repository import InMemoryCommitteeSlotRepository


@pytest.fixture
def memory_repo():
    return InMemoryCommitteeSlotRepository(committees={1: 20, 2: 0}, divisions={"AO", "BQ"})


@pytest.fixture
def service(memory_repo):
    return SlotAccountingService(memory_repo)


# ============================================
# VALIDATION
# ============================================

class TestValidation:
    """Requests rejected before reaching the store."""

    @pytest.mark.parametrize("committee_id", [0, -1, 2**31, "1", 1.5, True, None])
    def test_bad_committee_id(self, service, memory_repo, committee_id):
        with pytest.raises(GovernanceValidationError):
            service.add_slot_requirement(committee_id, "AO", 1)

        assert memory_repo.totals == {1: 20, 2: 0}

    @pytest.mark.parametrize("division", ["", "   ", None, 5])
    def test_bad_senate_division(self, service, division):
        with pytest.raises(GovernanceValidationError):
            service.add_slot_requirement(1, division, 1)

    @pytest.mark.parametrize("requirements", [-1, 2**31, 2**64, "3", 2.0, False, None])
    def test_bad_slot_requirements(self, service, requirements):
        with pytest.raises(GovernanceValidationError):
            service.add_slot_requirement(1, "AO", requirements)

    def test_update_validates_new_value(self, service):
        service.add_slot_requirement(1, "AO", 5)

        with pytest.raises(GovernanceValidationError):
            service.update_slot_requirement(1, "AO", -2)

        assert service.get_slot(1, "AO").slot_requirements == 5

    def test_delete_validates_key(self, service):
        with pytest.raises(GovernanceValidationError):
            service.delete_slot_requirement(0, "AO")


# ============================================
# ACCOUNTING
# ============================================

class TestAccounting:

    def test_add_then_update(self, service, memory_repo):
        key = service.add_slot_requirement(1, "AO", 5)
        assert key == SlotKey(1, "AO")
        assert memory_repo.totals[1] == 25

        result = service.update_slot_requirement(1, "AO", 3)

        assert result.found
        assert memory_repo.totals[1] == 23

    def test_update_unknown_slot(self, service, memory_repo):
        with pytest.raises(ResourceNotFound):
            service.update_slot_requirement(999, "ZZ", 3)

        assert memory_repo.totals == {1: 20, 2: 0}

    def test_add_unknown_committee(self, service, memory_repo):
        with pytest.raises(ForeignKeyViolation):
            service.add_slot_requirement(999, "AO", 5)

        assert memory_repo.totals == {1: 20, 2: 0}

    def test_add_duplicate(self, service, memory_repo):
        service.add_slot_requirement(2, "BQ", 4)

        with pytest.raises(UniqueConstraintViolation):
            service.add_slot_requirement(2, "BQ", 1)

        assert memory_repo.totals[2] == 4

    def test_delete_does_not_release_seats(self, service, memory_repo):
        service.add_slot_requirement(1, "AO", 5)

        first = service.delete_slot_requirement(1, "AO")
        second = service.delete_slot_requirement(1, "AO")

        assert first.row_count == 1
        assert second.row_count == 0
        assert memory_repo.totals[1] == 25

    def test_listings(self, service):
        service.add_slot_requirement(1, "BQ", 2)
        service.add_slot_requirement(1, "AO", 5)
        service.add_slot_requirement(2, "AO", 1)

        assert [s.senate_division for s in service.slots_for_committee(1)] == ["AO", "BQ"]
        assert [s.committee_id for s in service.slots_for_senate_division("AO")] == [1, 2]
        assert service.slots_for_committee(3) == []

    def test_listed_slots_are_snapshots(self, service):
        service.add_slot_requirement(1, "AO", 5)
        listed = service.slots_for_committee(1)
        by_division = service.slots_for_senate_division("AO")
        fetched = service.get_slot(1, "AO")

        service.update_slot_requirement(1, "AO", 3)

        assert listed[0].slot_requirements == 5
        assert by_division[0].slot_requirements == 5
        assert fetched.slot_requirements == 5
        assert service.get_slot(1, "AO").slot_requirements == 3
