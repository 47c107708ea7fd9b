"""Slot accounting service - business logic layer."""

from typing import List, Optional

from committee_service.core.models import CommitteeSlot, SlotKey, WriteResult
from committee_service.core.repository import CommitteeSlotRepository
from committee_service.core.validation import (
    validate_committee_id,
    validate_senate_division,
    validate_slot_request,
)


class SlotAccountingService:
    """Committee slot requirements and their committee totals."""

    def __init__(self, repository: CommitteeSlotRepository):
        self._repo = repository

    # -------------------------
    # CREATE
    # -------------------------

    def add_slot_requirement(
        self,
        committee_id: int,
        senate_division: str,
        slot_requirements: int,
    ) -> SlotKey:
        """Create a slot; the committee total grows by slot_requirements."""
        validate_slot_request(committee_id, senate_division, slot_requirements)

        slot = CommitteeSlot(
            committee_id=committee_id,
            senate_division=senate_division,
            slot_requirements=slot_requirements,
        )
        return self._repo.create(slot)

    # -------------------------
    # UPDATE
    # -------------------------

    def update_slot_requirement(
        self,
        committee_id: int,
        senate_division: str,
        slot_requirements: int,
    ) -> WriteResult:
        """
        Change a slot's requirement.

        The committee total moves by (new - old). Raises ResourceNotFound
        when the slot does not exist.
        """
        validate_slot_request(committee_id, senate_division, slot_requirements)
        return self._repo.update_requirements(committee_id, senate_division, slot_requirements)

    # -------------------------
    # DELETE
    # -------------------------

    def delete_slot_requirement(self, committee_id: int, senate_division: str) -> WriteResult:
        """Delete a slot. row_count is 0 when nothing matched."""
        validate_committee_id(committee_id)
        validate_senate_division(senate_division)
        return self._repo.delete(committee_id, senate_division)

    # -------------------------
    # READ
    # -------------------------

    def get_slot(self, committee_id: int, senate_division: str) -> Optional[CommitteeSlot]:
        return self._repo.get(committee_id, senate_division)

    def slots_for_committee(self, committee_id: int) -> List[CommitteeSlot]:
        return self._repo.list_by_committee(committee_id)

    def slots_for_senate_division(self, senate_division: str) -> List[CommitteeSlot]:
        return self._repo.list_by_senate_division(senate_division)
