#committee_service\infrastructure\postgres\slot_repository.py

"""Committee slot repository - keeps committee.total_slots in step with slot rows."""

import logging
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from committee_service.core.errors import ResourceNotFound, TransactionError
from committee_service.core.models import CommitteeSlot, SlotKey, WriteResult
from committee_service.core.repository import CommitteeSlotRepository
from committee_service.infrastructure.postgres.constraints import classify_integrity_error
from committee_service.infrastructure.postgres.database import get_session_factory
from committee_service.infrastructure.postgres.models import CommitteeORM, CommitteeSlotORM

logger = logging.getLogger(__name__)


# ============================================
# Mapping Functions
# ============================================

def orm_to_slot(orm: CommitteeSlotORM) -> CommitteeSlot:
    """Convert ORM model to domain model."""
    return CommitteeSlot(
        committee_id=orm.committee_id,
        senate_division=orm.senate_division_short_name,
        slot_requirements=orm.slot_requirements,
    )


def slot_to_orm(slot: CommitteeSlot) -> CommitteeSlotORM:
    """Convert domain model to ORM model."""
    return CommitteeSlotORM(
        committee_id=slot.committee_id,
        senate_division_short_name=slot.senate_division,
        slot_requirements=slot.slot_requirements,
    )


def _slot_filter(committee_id: int, senate_division: str):
    return (
        CommitteeSlotORM.committee_id == committee_id,
        CommitteeSlotORM.senate_division_short_name == senate_division,
    )


def adjust_total_slots(session: Session, committee_id: int, delta: int) -> int:
    """
    Add a signed delta to committee.total_slots inside the caller's transaction.

    Issued as UPDATE ... SET total_slots = total_slots + :delta.
    """
    result = session.execute(
        update(CommitteeORM)
        .where(CommitteeORM.committee_id == committee_id)
        .values(total_slots=CommitteeORM.total_slots + delta)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount


# ============================================
# Repository Implementation
# ============================================

class PostgresCommitteeSlotRepository(CommitteeSlotRepository):
    """
    Slot accounting transaction layer.

    Each write runs the slot statement and the committee.total_slots
    adjustment in one session; both commit or both roll back.
    """

    def __init__(self, session_factory: Optional[sessionmaker] = None):
        """
        Initialize repository with optional session factory.

        Args:
            session_factory: SQLAlchemy session factory. If None, uses the
                shared production factory (created on first use).
        """
        self._session_factory = session_factory

    def _get_session(self) -> Session:
        """Get new session from the injected factory."""
        factory = self._session_factory or get_session_factory()
        return factory()

    # -------------------------
    # CREATE
    # -------------------------

    def create(self, slot: CommitteeSlot) -> SlotKey:
        """Insert a slot and add its requirement to the committee total."""
        session = self._get_session()
        try:
            session.add(slot_to_orm(slot))
            session.flush()

            adjust_total_slots(session, slot.committee_id, slot.slot_requirements)

            session.commit()
            logger.info(
                f"[slot_repo] create ({slot.committee_id}, {slot.senate_division}) "
                f"+{slot.slot_requirements} -> done"
            )
            return slot.key
        except IntegrityError as e:
            session.rollback()
            raise classify_integrity_error(
                e, f"Failed to add slot ({slot.committee_id}, {slot.senate_division})"
            ) from e
        except SQLAlchemyError as e:
            session.rollback()
            raise TransactionError(f"Failed to add slot: {e}") from e
        finally:
            session.close()

    # -------------------------
    # READ
    # -------------------------

    def get(self, committee_id: int, senate_division: str) -> Optional[CommitteeSlot]:
        """Get slot by composite key."""
        session = self._get_session()
        try:
            orm = session.get(CommitteeSlotORM, (committee_id, senate_division))
            if orm is None:
                return None
            return orm_to_slot(orm)
        except SQLAlchemyError as e:
            raise TransactionError(f"Failed to read slot: {e}") from e
        finally:
            session.close()

    def list_by_committee(self, committee_id: int) -> List[CommitteeSlot]:
        session = self._get_session()
        try:
            rows = session.scalars(
                select(CommitteeSlotORM)
                .where(CommitteeSlotORM.committee_id == committee_id)
                .order_by(CommitteeSlotORM.senate_division_short_name)
            ).all()
            return [orm_to_slot(orm) for orm in rows]
        except SQLAlchemyError as e:
            raise TransactionError(f"Failed to list slots: {e}") from e
        finally:
            session.close()

    def list_by_senate_division(self, senate_division: str) -> List[CommitteeSlot]:
        session = self._get_session()
        try:
            rows = session.scalars(
                select(CommitteeSlotORM)
                .where(CommitteeSlotORM.senate_division_short_name == senate_division)
                .order_by(CommitteeSlotORM.committee_id)
            ).all()
            return [orm_to_slot(orm) for orm in rows]
        except SQLAlchemyError as e:
            raise TransactionError(f"Failed to list slots: {e}") from e
        finally:
            session.close()

    # -------------------------
    # UPDATE
    # -------------------------

    def update_requirements(
        self,
        committee_id: int,
        senate_division: str,
        slot_requirements: int,
    ) -> WriteResult:
        """
        Overwrite a slot requirement and move the committee total by the difference.

        The current value is read before the write transaction opens. Two
        concurrent updates of the same slot are last-committed-wins: each
        transaction is atomic, but the total reflects the delta each one
        computed from its own read. Recomputing the total with
        SUM(slot_requirements) inside the transaction would close that window.
        """
        current = self.get(committee_id, senate_division)
        if current is None:
            raise ResourceNotFound(
                f"Committee slot ({committee_id}, {senate_division}) not found"
            )

        delta = slot_requirements - current.slot_requirements

        session = self._get_session()
        try:
            result = session.execute(
                update(CommitteeSlotORM)
                .where(*_slot_filter(committee_id, senate_division))
                .values(slot_requirements=slot_requirements)
                .execution_options(synchronize_session=False)
            )
            row_count = result.rowcount

            # Slot vanished between the read and the write
            if row_count == 0:
                session.rollback()
                logger.info(
                    f"[slot_repo] update ({committee_id}, {senate_division}) -> 0 rows"
                )
                return WriteResult(command="UPDATE", row_count=0)

            adjust_total_slots(session, committee_id, delta)

            session.commit()
            logger.info(
                f"[slot_repo] update ({committee_id}, {senate_division}) "
                f"{current.slot_requirements} -> {slot_requirements} (delta {delta:+d})"
            )
            return WriteResult(command="UPDATE", row_count=row_count)
        except IntegrityError as e:
            session.rollback()
            raise classify_integrity_error(
                e, f"Failed to update slot ({committee_id}, {senate_division})"
            ) from e
        except SQLAlchemyError as e:
            session.rollback()
            raise TransactionError(f"Failed to update slot: {e}") from e
        finally:
            session.close()

    # -------------------------
    # DELETE
    # -------------------------

    def delete(self, committee_id: int, senate_division: str) -> WriteResult:
        """
        Delete a slot requirement.

        NOTE: committee.total_slots is left unchanged, unlike create and
        update. Whether a delete should release its seats is still open.
        The other writer of total_slots is CommitteeRepository.update
        (PUT /api/committee), which sets it directly.
        """
        session = self._get_session()
        try:
            result = session.execute(
                delete(CommitteeSlotORM)
                .where(*_slot_filter(committee_id, senate_division))
                .execution_options(synchronize_session=False)
            )
            session.commit()
            logger.info(
                f"[slot_repo] delete ({committee_id}, {senate_division}) "
                f"-> {result.rowcount} rows"
            )
            return WriteResult(command="DELETE", row_count=result.rowcount)
        except SQLAlchemyError as e:
            session.rollback()
            raise TransactionError(f"Failed to delete slot: {e}") from e
        finally:
            session.close()
