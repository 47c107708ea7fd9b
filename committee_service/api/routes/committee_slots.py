# committee_service/api/routes/committee_slots.py
"""Committee slot requirement routes."""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response

from committee_service.api.container import get_slot_service
from committee_service.api.schemas.common import PathInt
from committee_service.api.schemas.slots import (
    CommitteeSlotCreateRequest,
    CommitteeSlotResponse,
    CommitteeSlotUpdateRequest,
    DivisionSlotResponse,
    SlotCreatedResponse,
    WriteResultResponse,
)
from committee_service.core.errors import ResourceNotFound

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/committee-slots", tags=["committee-slots"])


# Registered before the /{committee_id}/{name} routes so the literal
# prefixes win the match.
@router.get("/committee/{committee_id}", response_model=List[DivisionSlotResponse])
def get_slots_by_committee(
    committee_id: PathInt,
    service=Depends(get_slot_service),
):
    slots = service.slots_for_committee(committee_id)
    if not slots:
        raise ResourceNotFound(f"No slot requirements for committee {committee_id}")

    return [
        DivisionSlotResponse(
            senate_division_short_name=slot.senate_division,
            slot_requirements=slot.slot_requirements,
        )
        for slot in slots
    ]


@router.get("/senate-division/{shortname}", response_model=List[CommitteeSlotResponse])
def get_slots_by_senate_division(
    shortname: str,
    service=Depends(get_slot_service),
):
    slots = service.slots_for_senate_division(shortname)
    if not slots:
        raise ResourceNotFound(f"No slot requirements for senate division {shortname}")

    return [
        CommitteeSlotResponse(
            committee_id=slot.committee_id,
            slot_requirements=slot.slot_requirements,
        )
        for slot in slots
    ]


@router.post("", status_code=201, response_model=SlotCreatedResponse)
def create_committee_slot(
    body: CommitteeSlotCreateRequest,
    request: Request,
    response: Response,
    service=Depends(get_slot_service),
):
    """
    Add a senate division's seats to a committee.

    The committee's total_slots grows by slotRequirements in the same
    transaction. 409 when the committee or division is unknown, or the
    pair already has a slot.
    """
    key = service.add_slot_requirement(
        committee_id=body.committee_id,
        senate_division=body.senate_division,
        slot_requirements=body.slot_requirements,
    )

    response.headers["Location"] = str(
        request.url_for(
            "get_committee_slot",
            committee_id=key.committee_id,
            senate_division_short_name=key.senate_division,
        )
    )
    logger.info(f"Added committee slot ({key.committee_id}, {key.senate_division})")

    return SlotCreatedResponse(
        committee_id=key.committee_id,
        senate_division=key.senate_division,
    )


@router.get(
    "/{committee_id}/{senate_division_short_name}",
    response_model=DivisionSlotResponse,
)
def get_committee_slot(
    committee_id: PathInt,
    senate_division_short_name: str,
    service=Depends(get_slot_service),
):
    slot = service.get_slot(committee_id, senate_division_short_name)
    if slot is None:
        raise ResourceNotFound(
            f"Committee slot ({committee_id}, {senate_division_short_name}) not found"
        )

    return DivisionSlotResponse(
        senate_division_short_name=slot.senate_division,
        slot_requirements=slot.slot_requirements,
    )


@router.put("/{id}/{name}", response_model=WriteResultResponse)
def update_committee_slot(
    id: PathInt,
    name: str,
    body: CommitteeSlotUpdateRequest,
    service=Depends(get_slot_service),
):
    """Change a slot requirement; the committee total moves by the difference."""
    result = service.update_slot_requirement(
        committee_id=id,
        senate_division=name,
        slot_requirements=body.slot_requirements,
    )

    if not result.found:
        raise ResourceNotFound(f"Committee slot ({id}, {name}) not found")

    logger.info(f"Updated committee slot ({id}, {name}) to {body.slot_requirements}")
    return WriteResultResponse(command=result.command, row_count=result.row_count)


@router.delete(
    "/{committee_id}/{senate_division_short_name}",
    response_model=WriteResultResponse,
)
def delete_slot_requirement(
    committee_id: PathInt,
    senate_division_short_name: str,
    service=Depends(get_slot_service),
):
    result = service.delete_slot_requirement(committee_id, senate_division_short_name)

    if not result.found:
        raise ResourceNotFound(
            f"Committee slot ({committee_id}, {senate_division_short_name}) not found"
        )

    logger.info(f"Deleted committee slot ({committee_id}, {senate_division_short_name})")
    return WriteResultResponse(command=result.command, row_count=result.row_count)
