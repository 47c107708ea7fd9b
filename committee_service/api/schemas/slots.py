from pydantic import BaseModel, Field

from committee_service.api.schemas.common import CamelModel
from committee_service.core.validation import MAX_DB_INT


class CommitteeSlotCreateRequest(CamelModel):
    committee_id: int = Field(..., gt=0, le=MAX_DB_INT, strict=True)
    senate_division: str = Field(..., min_length=1, max_length=32)
    slot_requirements: int = Field(..., ge=0, le=MAX_DB_INT, strict=True)


class CommitteeSlotUpdateRequest(CamelModel):
    slot_requirements: int = Field(..., ge=0, le=MAX_DB_INT, strict=True)


class SlotCreatedResponse(CamelModel):
    message: str = "Success"
    committee_id: int
    senate_division: str


class DivisionSlotResponse(BaseModel):
    """Slot row as seen from a committee."""
    senate_division_short_name: str
    slot_requirements: int


class CommitteeSlotResponse(BaseModel):
    """Slot row as seen from a senate division."""
    committee_id: int
    slot_requirements: int


class WriteResultResponse(CamelModel):
    message: str = "Success"
    command: str
    row_count: int
