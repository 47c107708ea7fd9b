"""Core domain models."""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional


@dataclass
class Committee:
    """Committee with its derived seat total."""

    committee_id: Optional[int]
    name: str
    description: Optional[str] = None

    # Maintained by the slot operations
    total_slots: int = 0


@dataclass(frozen=True)
class SlotKey:
    """Composite key of a committee slot record."""

    committee_id: int
    senate_division: str


@dataclass
class CommitteeSlot:
    """Seats allocated to one senate division within one committee."""

    committee_id: int
    senate_division: str
    slot_requirements: int = 0

    @property
    def key(self) -> SlotKey:
        return SlotKey(self.committee_id, self.senate_division)


@dataclass
class WriteResult:
    """Outcome of a single write statement."""

    command: str
    row_count: int

    @property
    def found(self) -> bool:
        return self.row_count > 0


@dataclass
class SenateDivision:
    senate_division_short_name: str
    name: str


@dataclass
class Department:
    department_id: Optional[int]
    name: str
    description: Optional[str] = None


@dataclass
class Faculty:
    """Faculty member, keyed by email."""

    email: str
    full_name: str
    senate_division_short_name: Optional[str] = None
    job_title: Optional[str] = None
    phone_num: Optional[str] = None


@dataclass
class FacultyDepartments:
    """Department ids grouped under one faculty email."""

    email: str
    department_ids: List[int] = field(default_factory=list)


@dataclass
class DepartmentFaculty:
    """Faculty emails grouped under one department id."""

    department_id: int
    emails: List[str] = field(default_factory=list)


@dataclass
class CommitteeAssignment:
    email: str
    committee_id: int
    start_date: date
    end_date: date
