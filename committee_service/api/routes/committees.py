# committee_service/api/routes/committees.py
"""Committee, senate division and department routes."""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response

from committee_service.api.container import get_committee_service
from committee_service.api.schemas.common import MessageResponse, PathInt
from committee_service.api.schemas.directory import (
    CommitteeCreateRequest,
    CommitteeResponse,
    CommitteeUpdateRequest,
    DepartmentResponse,
    SenateDivisionResponse,
)
from committee_service.core.errors import ResourceNotFound

logger = logging.getLogger(__name__)

router = APIRouter(tags=["committees"])


def _committee_response(committee) -> CommitteeResponse:
    return CommitteeResponse(
        committee_id=committee.committee_id,
        name=committee.name,
        description=committee.description,
        total_slots=committee.total_slots,
    )


# ============================================
# COMMITTEES
# ============================================

@router.post("/committee", status_code=201, response_model=MessageResponse)
def create_committee(
    body: CommitteeCreateRequest,
    request: Request,
    response: Response,
    service=Depends(get_committee_service),
):
    committee_id = service.create_committee(body.name, body.description, body.total_slots)

    response.headers["Location"] = str(request.url_for("get_committee", committee_id=committee_id))
    logger.info(f"Successfully added committee {committee_id} to database")
    return MessageResponse()


@router.put("/committee", response_model=MessageResponse)
def update_committee(
    body: CommitteeUpdateRequest,
    service=Depends(get_committee_service),
):
    """Update a committee; 409 when totalSlots is below its slot requirements."""
    result = service.update_committee(
        body.committee_id, body.name, body.description, body.total_slots
    )

    if not result.found:
        raise ResourceNotFound(f"Committee {body.committee_id} does not exist")

    logger.info(f"Updated committee with id {body.committee_id}")
    return MessageResponse()


@router.get("/committee/{committee_id}", response_model=CommitteeResponse)
def get_committee(
    committee_id: PathInt,
    service=Depends(get_committee_service),
):
    committee = service.get_committee(committee_id)
    if committee is None:
        raise ResourceNotFound(f"Committee {committee_id} not found")
    return _committee_response(committee)


@router.get("/committees", response_model=List[CommitteeResponse])
def list_committees(service=Depends(get_committee_service)):
    return [_committee_response(c) for c in service.list_committees()]


# ============================================
# SENATE DIVISIONS
# ============================================

@router.get("/senate-divisions", response_model=List[SenateDivisionResponse])
def list_senate_divisions(service=Depends(get_committee_service)):
    return [
        SenateDivisionResponse(
            senate_division_short_name=d.senate_division_short_name,
            name=d.name,
        )
        for d in service.list_senate_divisions()
    ]


@router.get("/senate-division/{shortname}", response_model=SenateDivisionResponse)
def get_senate_division(
    shortname: str,
    service=Depends(get_committee_service),
):
    division = service.get_senate_division(shortname)
    if division is None:
        raise ResourceNotFound(f"Senate division {shortname} not found")

    return SenateDivisionResponse(
        senate_division_short_name=division.senate_division_short_name,
        name=division.name,
    )


# ============================================
# DEPARTMENTS
# ============================================

@router.get("/departments", response_model=List[DepartmentResponse])
def list_departments(service=Depends(get_committee_service)):
    return [
        DepartmentResponse(department_id=d.department_id, name=d.name, description=d.description)
        for d in service.list_departments()
    ]


@router.get("/department/{department_id}", response_model=DepartmentResponse)
def get_department(
    department_id: PathInt,
    service=Depends(get_committee_service),
):
    department = service.get_department(department_id)
    if department is None:
        raise ResourceNotFound(f"Department {department_id} not found")

    return DepartmentResponse(
        department_id=department.department_id,
        name=department.name,
        description=department.description,
    )
