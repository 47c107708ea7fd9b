from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from committee_service.api.schemas.common import CamelModel
from committee_service.core.validation import MAX_DB_INT


# -------------------------
# Committees
# -------------------------

class CommitteeCreateRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    total_slots: int = Field(..., ge=0, le=MAX_DB_INT, strict=True)


class CommitteeUpdateRequest(CommitteeCreateRequest):
    committee_id: int = Field(..., gt=0, le=MAX_DB_INT, strict=True)


class CommitteeResponse(BaseModel):
    committee_id: int
    name: str
    description: Optional[str]
    total_slots: int


class SenateDivisionResponse(BaseModel):
    senate_division_short_name: str
    name: str


class DepartmentResponse(BaseModel):
    department_id: int
    name: str
    description: Optional[str]


# -------------------------
# Faculty
# -------------------------

class DepartmentRef(CamelModel):
    department_id: int = Field(..., gt=0, le=MAX_DB_INT)


class FacultyRequest(CamelModel):
    email: str = Field(..., min_length=3, max_length=255)
    full_name: str = Field(..., min_length=1, max_length=255)
    job_title: Optional[str] = None
    phone_num: Optional[str] = None
    senate_division: Optional[str] = None
    department_associations: Optional[List[DepartmentRef]] = None

    def department_ids(self) -> Optional[List[int]]:
        if self.department_associations is None:
            return None
        return [ref.department_id for ref in self.department_associations]


class FacultyResponse(BaseModel):
    email: str
    full_name: str
    job_title: Optional[str]
    phone_num: Optional[str]
    senate_division_short_name: Optional[str]


class DepartmentAssociationUpdateRequest(CamelModel):
    email: str = Field(..., min_length=3)
    old_department_id: int = Field(..., gt=0, le=MAX_DB_INT)
    new_department_id: int = Field(..., gt=0, le=MAX_DB_INT)


class DepartmentFacultyResponse(BaseModel):
    department_id: int
    emails: List[str]


class FacultyDepartmentsResponse(BaseModel):
    email: str
    department_ids: List[int]


# -------------------------
# Committee assignments
# -------------------------

class CommitteeAssignmentRequest(CamelModel):
    email: str = Field(..., min_length=3)
    committee_id: int = Field(..., gt=0, le=MAX_DB_INT)
    start_date: date
    end_date: date


class CommitteeAssignmentResponse(BaseModel):
    email: str
    committee_id: int
    start_date: date
    end_date: date
