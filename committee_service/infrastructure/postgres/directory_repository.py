"""Committee, senate division and department repositories."""

import logging
from typing import List, Optional

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from committee_service.core.errors import BusinessRuleViolation, TransactionError
from committee_service.core.models import Committee, Department, SenateDivision, WriteResult
from committee_service.infrastructure.postgres.constraints import classify_integrity_error
from committee_service.infrastructure.postgres.database import get_session_factory
from committee_service.infrastructure.postgres.models import (
    CommitteeORM,
    CommitteeSlotORM,
    DepartmentORM,
    SenateDivisionORM,
)

logger = logging.getLogger(__name__)


def orm_to_committee(orm: CommitteeORM) -> Committee:
    return Committee(
        committee_id=orm.committee_id,
        name=orm.name,
        description=orm.description,
        total_slots=orm.total_slots,
    )


def orm_to_division(orm: SenateDivisionORM) -> SenateDivision:
    return SenateDivision(
        senate_division_short_name=orm.senate_division_short_name,
        name=orm.name,
    )


def orm_to_department(orm: DepartmentORM) -> Department:
    return Department(
        department_id=orm.department_id,
        name=orm.name,
        description=orm.description,
    )


class CommitteeRepository:
    """Repository for committees."""

    def __init__(self, session_factory: Optional[sessionmaker] = None):
        self._session_factory = session_factory

    def _get_session(self):
        return (self._session_factory or get_session_factory())()

    def create(self, committee: Committee) -> int:
        """Insert a committee and return its generated id."""
        session = self._get_session()
        try:
            orm = CommitteeORM(
                name=committee.name,
                description=committee.description,
                total_slots=committee.total_slots,
            )
            session.add(orm)
            session.flush()
            committee_id = orm.committee_id

            session.commit()
            logger.info(f"[committee_repo] created committee {committee_id} ({committee.name})")
            return committee_id
        except IntegrityError as e:
            session.rollback()
            raise classify_integrity_error(e, f"Failed to add committee {committee.name}") from e
        except SQLAlchemyError as e:
            session.rollback()
            raise TransactionError(f"Failed to add committee: {e}") from e
        finally:
            session.close()

    def get(self, committee_id: int) -> Optional[Committee]:
        """Get committee by ID."""
        session = self._get_session()
        try:
            orm = session.get(CommitteeORM, committee_id)
            if not orm:
                return None
            return orm_to_committee(orm)
        except SQLAlchemyError as e:
            raise TransactionError(f"Failed to read committee: {e}") from e
        finally:
            session.close()

    def list_all(self) -> List[Committee]:
        """List committees ordered by name."""
        session = self._get_session()
        try:
            rows = session.scalars(select(CommitteeORM).order_by(CommitteeORM.name)).all()
            return [orm_to_committee(orm) for orm in rows]
        except SQLAlchemyError as e:
            raise TransactionError(f"Failed to list committees: {e}") from e
        finally:
            session.close()

    def update(self, committee: Committee) -> WriteResult:
        """
        Update name, description and total_slots.

        total_slots may not drop below the committee's summed slot
        requirements; the check and the write share one transaction.

        NOTE: this is the only writer of committee.total_slots outside the
        slot operations in slot_repository. The minimum-seat check keeps the
        total from falling below what the slots require.
        """
        session = self._get_session()
        try:
            current = session.scalars(
                select(CommitteeORM)
                .where(CommitteeORM.committee_id == committee.committee_id)
                .with_for_update()
            ).first()

            if current is None:
                return WriteResult(command="UPDATE", row_count=0)

            minimum = session.scalar(
                select(func.coalesce(func.sum(CommitteeSlotORM.slot_requirements), 0))
                .where(CommitteeSlotORM.committee_id == committee.committee_id)
            )
            if committee.total_slots < minimum:
                raise BusinessRuleViolation(
                    f"total_slots {committee.total_slots} is below the "
                    f"{minimum} seats required by committee {committee.committee_id}'s slots"
                )

            result = session.execute(
                update(CommitteeORM)
                .where(CommitteeORM.committee_id == committee.committee_id)
                .values(
                    name=committee.name,
                    description=committee.description,
                    total_slots=committee.total_slots,
                )
                .execution_options(synchronize_session=False)
            )
            session.commit()
            logger.info(f"[committee_repo] updated committee {committee.committee_id}")
            return WriteResult(command="UPDATE", row_count=result.rowcount)
        except BusinessRuleViolation:
            session.rollback()
            raise
        except IntegrityError as e:
            session.rollback()
            raise classify_integrity_error(
                e, f"Failed to update committee {committee.committee_id}"
            ) from e
        except SQLAlchemyError as e:
            session.rollback()
            raise TransactionError(f"Failed to update committee: {e}") from e
        finally:
            session.close()


class SenateDivisionRepository:
    """Read-only access to senate divisions."""

    def __init__(self, session_factory: Optional[sessionmaker] = None):
        self._session_factory = session_factory

    def _get_session(self):
        return (self._session_factory or get_session_factory())()

    def get(self, short_name: str) -> Optional[SenateDivision]:
        session = self._get_session()
        try:
            orm = session.get(SenateDivisionORM, short_name)
            if not orm:
                return None
            return orm_to_division(orm)
        except SQLAlchemyError as e:
            raise TransactionError(f"Failed to read senate division: {e}") from e
        finally:
            session.close()

    def list_all(self) -> List[SenateDivision]:
        session = self._get_session()
        try:
            rows = session.scalars(
                select(SenateDivisionORM).order_by(SenateDivisionORM.senate_division_short_name)
            ).all()
            return [orm_to_division(orm) for orm in rows]
        except SQLAlchemyError as e:
            raise TransactionError(f"Failed to list senate divisions: {e}") from e
        finally:
            session.close()


class DepartmentRepository:
    """Read-only access to departments."""

    def __init__(self, session_factory: Optional[sessionmaker] = None):
        self._session_factory = session_factory

    def _get_session(self):
        return (self._session_factory or get_session_factory())()

    def get(self, department_id: int) -> Optional[Department]:
        session = self._get_session()
        try:
            orm = session.get(DepartmentORM, department_id)
            if not orm:
                return None
            return orm_to_department(orm)
        except SQLAlchemyError as e:
            raise TransactionError(f"Failed to read department: {e}") from e
        finally:
            session.close()

    def list_all(self) -> List[Department]:
        session = self._get_session()
        try:
            rows = session.scalars(select(DepartmentORM).order_by(DepartmentORM.department_id)).all()
            return [orm_to_department(orm) for orm in rows]
        except SQLAlchemyError as e:
            raise TransactionError(f"Failed to list departments: {e}") from e
        finally:
            session.close()
