# committee_service/infrastructure/memory/repository.py

from threading import Lock
from typing import Dict, List, Optional, Tuple

from committee_service.core.errors import (
    ForeignKeyViolation,
    ResourceNotFound,
    UniqueConstraintViolation,
)
from committee_service.core.models import CommitteeSlot, SlotKey, WriteResult
from committee_service.core.repository import CommitteeSlotRepository


def _copy(slot: CommitteeSlot) -> CommitteeSlot:
    return CommitteeSlot(slot.committee_id, slot.senate_division, slot.slot_requirements)


class InMemoryCommitteeSlotRepository(CommitteeSlotRepository):
    """Dict-backed slot store with the same accounting rules as Postgres."""

    def __init__(self, committees: Optional[Dict[int, int]] = None, divisions=()):
        # committee_id -> total_slots
        self.totals: Dict[int, int] = dict(committees or {})
        self.divisions = set(divisions)
        self._slots: Dict[Tuple[int, str], CommitteeSlot] = {}
        self._lock = Lock()

    def create(self, slot: CommitteeSlot) -> SlotKey:
        with self._lock:
            if slot.committee_id not in self.totals:
                raise ForeignKeyViolation(f"Committee {slot.committee_id} does not exist")
            if slot.senate_division not in self.divisions:
                raise ForeignKeyViolation(f"Senate division {slot.senate_division} does not exist")

            key = (slot.committee_id, slot.senate_division)
            if key in self._slots:
                raise UniqueConstraintViolation(f"Committee slot {key} already exists")

            self._slots[key] = _copy(slot)
            self.totals[slot.committee_id] += slot.slot_requirements
            return slot.key

    def get(self, committee_id: int, senate_division: str) -> Optional[CommitteeSlot]:
        with self._lock:
            slot = self._slots.get((committee_id, senate_division))
            if slot is None:
                return None
            return _copy(slot)

    def update_requirements(
        self,
        committee_id: int,
        senate_division: str,
        slot_requirements: int,
    ) -> WriteResult:
        with self._lock:
            slot = self._slots.get((committee_id, senate_division))
            if slot is None:
                raise ResourceNotFound(
                    f"Committee slot ({committee_id}, {senate_division}) not found"
                )

            delta = slot_requirements - slot.slot_requirements
            slot.slot_requirements = slot_requirements
            self.totals[committee_id] += delta
            return WriteResult(command="UPDATE", row_count=1)

    def delete(self, committee_id: int, senate_division: str) -> WriteResult:
        with self._lock:
            removed = self._slots.pop((committee_id, senate_division), None)
            # total_slots untouched, matching the Postgres repository
            return WriteResult(command="DELETE", row_count=0 if removed is None else 1)

    def list_by_committee(self, committee_id: int) -> List[CommitteeSlot]:
        with self._lock:
            return sorted(
                (_copy(s) for s in self._slots.values() if s.committee_id == committee_id),
                key=lambda s: s.senate_division,
            )

    def list_by_senate_division(self, senate_division: str) -> List[CommitteeSlot]:
        with self._lock:
            return sorted(
                (_copy(s) for s in self._slots.values() if s.senate_division == senate_division),
                key=lambda s: s.committee_id,
            )
