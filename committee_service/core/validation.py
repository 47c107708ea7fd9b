#committee_service\core\validation.py
from committee_service.core.errors import GovernanceValidationError

# Upper bound of a PostgreSQL INTEGER column
MAX_DB_INT = 2_147_483_647


def validate_committee_id(committee_id) -> None:
    if isinstance(committee_id, bool) or not isinstance(committee_id, int):
        raise GovernanceValidationError("committee_id must be an integer")

    if committee_id < 1:
        raise GovernanceValidationError("committee_id must be positive")

    if committee_id > MAX_DB_INT:
        raise GovernanceValidationError("committee_id out of range")


def validate_senate_division(senate_division) -> None:
    if not isinstance(senate_division, str) or not senate_division.strip():
        raise GovernanceValidationError("senate_division is required")


def validate_slot_count(value, field_name: str = "slot_requirements") -> None:
    # -------------------------
    # Seat counts are non-negative integers
    # -------------------------
    if isinstance(value, bool) or not isinstance(value, int):
        raise GovernanceValidationError(f"{field_name} must be an integer")

    if value < 0:
        raise GovernanceValidationError(f"{field_name} must not be negative")

    if value > MAX_DB_INT:
        raise GovernanceValidationError(f"{field_name} out of range")


def validate_slot_request(committee_id, senate_division, slot_requirements) -> None:
    validate_committee_id(committee_id)
    validate_senate_division(senate_division)
    validate_slot_count(slot_requirements)
