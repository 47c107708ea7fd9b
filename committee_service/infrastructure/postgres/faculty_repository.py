"""Faculty, department association and committee assignment repositories."""

import logging
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from committee_service.core.errors import TransactionError
from committee_service.core.models import (
    CommitteeAssignment,
    DepartmentFaculty,
    Faculty,
    FacultyDepartments,
    WriteResult,
)
from committee_service.infrastructure.postgres.constraints import classify_integrity_error
from committee_service.infrastructure.postgres.database import get_session_factory
from committee_service.infrastructure.postgres.models import (
    CommitteeAssignmentORM,
    DepartmentAssociationORM,
    FacultyORM,
)

logger = logging.getLogger(__name__)


def orm_to_faculty(orm: FacultyORM) -> Faculty:
    return Faculty(
        email=orm.email,
        full_name=orm.full_name,
        senate_division_short_name=orm.senate_division_short_name,
        job_title=orm.job_title,
        phone_num=orm.phone_num,
    )


def orm_to_assignment(orm: CommitteeAssignmentORM) -> CommitteeAssignment:
    return CommitteeAssignment(
        email=orm.email,
        committee_id=orm.committee_id,
        start_date=orm.start_date,
        end_date=orm.end_date,
    )


class FacultyRepository:
    """Repository for faculty members and their department links."""

    def __init__(self, session_factory: Optional[sessionmaker] = None):
        self._session_factory = session_factory

    def _get_session(self):
        return (self._session_factory or get_session_factory())()

    def create(self, faculty: Faculty, department_ids: Optional[List[int]] = None) -> str:
        """Insert a faculty member and any department associations in one transaction."""
        session = self._get_session()
        try:
            session.add(FacultyORM(
                email=faculty.email,
                full_name=faculty.full_name,
                job_title=faculty.job_title,
                phone_num=faculty.phone_num,
                senate_division_short_name=faculty.senate_division_short_name,
            ))
            session.flush()

            for department_id in department_ids or []:
                session.add(DepartmentAssociationORM(email=faculty.email, department_id=department_id))
            session.flush()

            session.commit()
            logger.info(
                f"[faculty_repo] created faculty {faculty.email} "
                f"with {len(department_ids or [])} departments"
            )
            return faculty.email
        except IntegrityError as e:
            session.rollback()
            raise classify_integrity_error(e, f"Failed to add faculty {faculty.email}") from e
        except SQLAlchemyError as e:
            session.rollback()
            raise TransactionError(f"Failed to add faculty: {e}") from e
        finally:
            session.close()

    def get(self, email: str) -> Optional[Faculty]:
        session = self._get_session()
        try:
            orm = session.get(FacultyORM, email)
            if not orm:
                return None
            return orm_to_faculty(orm)
        except SQLAlchemyError as e:
            raise TransactionError(f"Failed to read faculty: {e}") from e
        finally:
            session.close()

    def list_all(self) -> List[Faculty]:
        session = self._get_session()
        try:
            rows = session.scalars(select(FacultyORM).order_by(FacultyORM.full_name.asc())).all()
            return [orm_to_faculty(orm) for orm in rows]
        except SQLAlchemyError as e:
            raise TransactionError(f"Failed to list faculty: {e}") from e
        finally:
            session.close()

    def update(self, faculty: Faculty, department_ids: Optional[List[int]] = None) -> WriteResult:
        """
        Update a faculty member.

        When department_ids is a list (even empty) the member's associations
        are replaced with it in the same transaction; None leaves them alone.
        """
        session = self._get_session()
        try:
            result = session.execute(
                update(FacultyORM)
                .where(FacultyORM.email == faculty.email)
                .values(
                    full_name=faculty.full_name,
                    job_title=faculty.job_title,
                    phone_num=faculty.phone_num,
                    senate_division_short_name=faculty.senate_division_short_name,
                )
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                session.rollback()
                return WriteResult(command="UPDATE", row_count=0)

            if department_ids is not None:
                session.execute(
                    delete(DepartmentAssociationORM)
                    .where(DepartmentAssociationORM.email == faculty.email)
                    .execution_options(synchronize_session=False)
                )
                for department_id in department_ids:
                    session.add(DepartmentAssociationORM(email=faculty.email, department_id=department_id))
                session.flush()

            session.commit()
            logger.info(f"[faculty_repo] updated faculty {faculty.email}")
            return WriteResult(command="UPDATE", row_count=result.rowcount)
        except IntegrityError as e:
            session.rollback()
            raise classify_integrity_error(e, f"Failed to update faculty {faculty.email}") from e
        except SQLAlchemyError as e:
            session.rollback()
            raise TransactionError(f"Failed to update faculty: {e}") from e
        finally:
            session.close()


class DepartmentAssociationRepository:
    """Links between faculty and departments."""

    def __init__(self, session_factory: Optional[sessionmaker] = None):
        self._session_factory = session_factory

    def _get_session(self):
        return (self._session_factory or get_session_factory())()

    def by_department(self, department_id: int) -> Optional[DepartmentFaculty]:
        """Emails associated with a department, or None when there are none."""
        session = self._get_session()
        try:
            emails = session.scalars(
                select(DepartmentAssociationORM.email)
                .where(DepartmentAssociationORM.department_id == department_id)
                .order_by(DepartmentAssociationORM.email)
            ).all()
            if not emails:
                return None
            return DepartmentFaculty(department_id=department_id, emails=list(emails))
        except SQLAlchemyError as e:
            raise TransactionError(f"Failed to read department associations: {e}") from e
        finally:
            session.close()

    def by_faculty(self, email: str) -> Optional[FacultyDepartments]:
        """Department ids associated with a faculty member, or None."""
        session = self._get_session()
        try:
            department_ids = session.scalars(
                select(DepartmentAssociationORM.department_id)
                .where(DepartmentAssociationORM.email == email)
                .order_by(DepartmentAssociationORM.department_id)
            ).all()
            if not department_ids:
                return None
            return FacultyDepartments(email=email, department_ids=list(department_ids))
        except SQLAlchemyError as e:
            raise TransactionError(f"Failed to read department associations: {e}") from e
        finally:
            session.close()

    def reassign(self, email: str, old_department_id: int, new_department_id: int) -> WriteResult:
        """Move one association from old_department_id to new_department_id."""
        session = self._get_session()
        try:
            result = session.execute(
                update(DepartmentAssociationORM)
                .where(
                    DepartmentAssociationORM.email == email,
                    DepartmentAssociationORM.department_id == old_department_id,
                )
                .values(department_id=new_department_id)
                .execution_options(synchronize_session=False)
            )
            session.commit()
            logger.info(
                f"[association_repo] {email}: {old_department_id} -> {new_department_id} "
                f"({result.rowcount} rows)"
            )
            return WriteResult(command="UPDATE", row_count=result.rowcount)
        except IntegrityError as e:
            session.rollback()
            raise classify_integrity_error(e, f"Failed to update associations for {email}") from e
        except SQLAlchemyError as e:
            session.rollback()
            raise TransactionError(f"Failed to update department association: {e}") from e
        finally:
            session.close()


class CommitteeAssignmentRepository:
    """Faculty seats held on committees."""

    def __init__(self, session_factory: Optional[sessionmaker] = None):
        self._session_factory = session_factory

    def _get_session(self):
        return (self._session_factory or get_session_factory())()

    def create(self, assignment: CommitteeAssignment) -> str:
        session = self._get_session()
        try:
            session.add(CommitteeAssignmentORM(
                email=assignment.email,
                committee_id=assignment.committee_id,
                start_date=assignment.start_date,
                end_date=assignment.end_date,
            ))
            session.commit()
            logger.info(
                f"[assignment_repo] assigned {assignment.email} to committee {assignment.committee_id}"
            )
            return assignment.email
        except IntegrityError as e:
            session.rollback()
            raise classify_integrity_error(
                e, f"Failed to assign {assignment.email} to committee {assignment.committee_id}"
            ) from e
        except SQLAlchemyError as e:
            session.rollback()
            raise TransactionError(f"Failed to add committee assignment: {e}") from e
        finally:
            session.close()

    def list_by_committee(self, committee_id: int) -> List[CommitteeAssignment]:
        session = self._get_session()
        try:
            rows = session.scalars(
                select(CommitteeAssignmentORM)
                .where(CommitteeAssignmentORM.committee_id == committee_id)
                .order_by(CommitteeAssignmentORM.email)
            ).all()
            return [orm_to_assignment(orm) for orm in rows]
        except SQLAlchemyError as e:
            raise TransactionError(f"Failed to list committee assignments: {e}") from e
        finally:
            session.close()

    def list_by_faculty(self, email: str) -> List[CommitteeAssignment]:
        session = self._get_session()
        try:
            rows = session.scalars(
                select(CommitteeAssignmentORM)
                .where(CommitteeAssignmentORM.email == email)
                .order_by(CommitteeAssignmentORM.committee_id)
            ).all()
            return [orm_to_assignment(orm) for orm in rows]
        except SQLAlchemyError as e:
            raise TransactionError(f"Failed to list committee assignments: {e}") from e
        finally:
            session.close()

    def update(self, assignment: CommitteeAssignment) -> WriteResult:
        session = self._get_session()
        try:
            result = session.execute(
                update(CommitteeAssignmentORM)
                .where(
                    CommitteeAssignmentORM.email == assignment.email,
                    CommitteeAssignmentORM.committee_id == assignment.committee_id,
                )
                .values(start_date=assignment.start_date, end_date=assignment.end_date)
                .execution_options(synchronize_session=False)
            )
            session.commit()
            return WriteResult(command="UPDATE", row_count=result.rowcount)
        except SQLAlchemyError as e:
            session.rollback()
            raise TransactionError(f"Failed to update committee assignment: {e}") from e
        finally:
            session.close()

    def delete(self, committee_id: int, email: str) -> WriteResult:
        session = self._get_session()
        try:
            result = session.execute(
                delete(CommitteeAssignmentORM)
                .where(
                    CommitteeAssignmentORM.committee_id == committee_id,
                    CommitteeAssignmentORM.email == email,
                )
                .execution_options(synchronize_session=False)
            )
            session.commit()
            logger.info(
                f"[assignment_repo] removed {email} from committee {committee_id} "
                f"({result.rowcount} rows)"
            )
            return WriteResult(command="DELETE", row_count=result.rowcount)
        except SQLAlchemyError as e:
            session.rollback()
            raise TransactionError(f"Failed to delete committee assignment: {e}") from e
        finally:
            session.close()
