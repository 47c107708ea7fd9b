# committee_service/api/routes/faculty.py
"""Faculty, department association and committee assignment routes."""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response

from committee_service.api.container import get_faculty_service
from committee_service.api.schemas.common import MessageResponse, PathInt
from committee_service.api.schemas.directory import (
    CommitteeAssignmentRequest,
    CommitteeAssignmentResponse,
    DepartmentAssociationUpdateRequest,
    DepartmentFacultyResponse,
    FacultyDepartmentsResponse,
    FacultyRequest,
    FacultyResponse,
)
from committee_service.core.errors import ResourceNotFound
from committee_service.core.models import Faculty

logger = logging.getLogger(__name__)

router = APIRouter(tags=["faculty"])


def _faculty_from_request(body: FacultyRequest) -> Faculty:
    return Faculty(
        email=body.email,
        full_name=body.full_name,
        job_title=body.job_title,
        phone_num=body.phone_num,
        senate_division_short_name=body.senate_division,
    )


def _faculty_response(faculty: Faculty) -> FacultyResponse:
    return FacultyResponse(
        email=faculty.email,
        full_name=faculty.full_name,
        job_title=faculty.job_title,
        phone_num=faculty.phone_num,
        senate_division_short_name=faculty.senate_division_short_name,
    )


def _assignment_response(assignment) -> CommitteeAssignmentResponse:
    return CommitteeAssignmentResponse(
        email=assignment.email,
        committee_id=assignment.committee_id,
        start_date=assignment.start_date,
        end_date=assignment.end_date,
    )


# ============================================
# FACULTY
# ============================================

@router.get("/faculty", response_model=List[FacultyResponse])
def list_faculty(service=Depends(get_faculty_service)):
    return [_faculty_response(f) for f in service.list_faculty()]


@router.get("/faculty/{email}", response_model=FacultyResponse)
def get_faculty(
    email: str,
    service=Depends(get_faculty_service),
):
    faculty = service.get_faculty(email)
    if faculty is None:
        raise ResourceNotFound(f"Faculty {email} not found")
    return _faculty_response(faculty)


@router.post("/faculty", status_code=201, response_model=MessageResponse)
def create_faculty(
    body: FacultyRequest,
    request: Request,
    response: Response,
    service=Depends(get_faculty_service),
):
    """Add a faculty member; departmentAssociations are inserted in the same transaction."""
    email = service.add_faculty(_faculty_from_request(body), body.department_ids())

    response.headers["Location"] = str(request.url_for("get_faculty", email=email))
    logger.info(f"Successfully added faculty {email} to database")
    return MessageResponse()


@router.put("/faculty", response_model=MessageResponse)
def update_faculty(
    body: FacultyRequest,
    service=Depends(get_faculty_service),
):
    result = service.update_faculty(_faculty_from_request(body), body.department_ids())

    if not result.found:
        raise ResourceNotFound(f"Faculty {body.email} does not exist")

    logger.info(f"Updated faculty {body.email}")
    return MessageResponse()


# ============================================
# DEPARTMENT ASSOCIATIONS
# ============================================

@router.get(
    "/department-associations/department/{department_id}",
    response_model=DepartmentFacultyResponse,
)
def get_department_associations_by_department(
    department_id: PathInt,
    service=Depends(get_faculty_service),
):
    grouped = service.faculty_in_department(department_id)
    if grouped is None:
        raise ResourceNotFound(f"No department association found for id {department_id}")
    return DepartmentFacultyResponse(department_id=grouped.department_id, emails=grouped.emails)


@router.get(
    "/department-associations/faculty/{email}",
    response_model=FacultyDepartmentsResponse,
)
def get_department_associations_by_faculty(
    email: str,
    service=Depends(get_faculty_service),
):
    grouped = service.departments_of_faculty(email)
    if grouped is None:
        raise ResourceNotFound(f"No department association found for email {email}")
    return FacultyDepartmentsResponse(email=grouped.email, department_ids=grouped.department_ids)


@router.put("/department-associations", response_model=MessageResponse)
def update_department_association(
    body: DepartmentAssociationUpdateRequest,
    service=Depends(get_faculty_service),
):
    result = service.move_department_association(
        body.email, body.old_department_id, body.new_department_id
    )

    if not result.found:
        raise ResourceNotFound(
            f"No association between {body.email} and department {body.old_department_id}"
        )

    logger.info(f"Updated department association with email {body.email}")
    return MessageResponse()


# ============================================
# COMMITTEE ASSIGNMENTS
# ============================================

@router.post("/committee-assignment", status_code=201, response_model=MessageResponse)
def create_committee_assignment(
    body: CommitteeAssignmentRequest,
    request: Request,
    response: Response,
    service=Depends(get_faculty_service),
):
    service.assign_to_committee(body.email, body.committee_id, body.start_date, body.end_date)

    response.headers["Location"] = str(
        request.url_for("get_committee_assignments_by_faculty", email=body.email)
    )
    logger.info(f"Assigned {body.email} to committee {body.committee_id}")
    return MessageResponse()


@router.get(
    "/committee-assignment/committee/{committee_id}",
    response_model=List[CommitteeAssignmentResponse],
)
def get_committee_assignments_by_committee(
    committee_id: PathInt,
    service=Depends(get_faculty_service),
):
    assignments = service.assignments_for_committee(committee_id)
    if not assignments:
        raise ResourceNotFound(f"No committee assignments for committee {committee_id}")
    return [_assignment_response(a) for a in assignments]


@router.get(
    "/committee-assignment/faculty/{email}",
    response_model=List[CommitteeAssignmentResponse],
)
def get_committee_assignments_by_faculty(
    email: str,
    service=Depends(get_faculty_service),
):
    assignments = service.assignments_for_faculty(email)
    if not assignments:
        raise ResourceNotFound(f"No committee assignments for {email}")
    return [_assignment_response(a) for a in assignments]


@router.put("/committee-assignment", response_model=MessageResponse)
def update_committee_assignment(
    body: CommitteeAssignmentRequest,
    service=Depends(get_faculty_service),
):
    result = service.update_assignment(body.email, body.committee_id, body.start_date, body.end_date)

    if not result.found:
        raise ResourceNotFound(
            f"No assignment of {body.email} to committee {body.committee_id}"
        )
    return MessageResponse()


@router.delete("/committee-assignment/{committee_id}/{email}", response_model=MessageResponse)
def delete_committee_assignment(
    committee_id: PathInt,
    email: str,
    service=Depends(get_faculty_service),
):
    result = service.remove_assignment(committee_id, email)

    if not result.found:
        raise ResourceNotFound(f"No assignment of {email} to committee {committee_id}")

    logger.info(f"Removed {email} from committee {committee_id}")
    return MessageResponse()
