# committee_service/core/errors.py

# -----------------------------
# Base Errors
# -----------------------------

class GovernanceError(Exception):
    """Base class for all committee service errors."""
    pass


# -----------------------------
# Validation / Business Rule Errors
# -----------------------------

class GovernanceValidationError(GovernanceError):
    """Invalid input or malformed request."""
    pass


class BusinessRuleViolation(GovernanceError):
    """Request is well formed but conflicts with current data."""
    pass


# -----------------------------
# Persistence Errors
# -----------------------------

class GovernancePersistenceError(GovernanceError):
    pass


class ResourceNotFound(GovernancePersistenceError):
    """Target row does not exist (pre-read miss or zero row count)."""
    pass


class ConstraintViolation(GovernancePersistenceError):
    """Store rejected the write because of a constraint."""
    pass


class ForeignKeyViolation(ConstraintViolation):
    pass


class UniqueConstraintViolation(ConstraintViolation):
    pass


class TransactionError(GovernancePersistenceError):
    """Connection loss, timeout or any unclassified store failure."""
    pass
