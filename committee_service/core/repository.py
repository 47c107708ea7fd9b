# committee_service/core/repository.py

from abc import ABC, abstractmethod
from typing import List, Optional

from committee_service.core.models import CommitteeSlot, SlotKey, WriteResult


class CommitteeSlotRepository(ABC):
    """
    Persistence contract for committee slot requirements.

    Every write keeps committee.total_slots in step with the slot rows
    inside a single transaction.
    """

    @abstractmethod
    def create(self, slot: CommitteeSlot) -> SlotKey:
        """
        Insert the slot and add its requirement to the committee total.
        Must fail with ForeignKeyViolation / UniqueConstraintViolation
        without touching the total.
        """
        raise NotImplementedError

    @abstractmethod
    def get(self, committee_id: int, senate_division: str) -> Optional[CommitteeSlot]:
        """
        Fetch a slot by its composite key.
        Returns None if not found.
        """
        raise NotImplementedError

    @abstractmethod
    def update_requirements(
        self,
        committee_id: int,
        senate_division: str,
        slot_requirements: int,
    ) -> WriteResult:
        """
        Overwrite the slot requirement and move the committee total by
        the difference from the previously read value.
        Raises ResourceNotFound when the slot does not exist.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, committee_id: int, senate_division: str) -> WriteResult:
        """
        Delete the slot. A missing slot yields row_count 0.
        """
        raise NotImplementedError

    @abstractmethod
    def list_by_committee(self, committee_id: int) -> List[CommitteeSlot]:
        raise NotImplementedError

    @abstractmethod
    def list_by_senate_division(self, senate_division: str) -> List[CommitteeSlot]:
        raise NotImplementedError
