"""Custom exceptions for ESOP Planner."""

from esopplan.models.enums import IngestionPhase


class EsopPlannerError(Exception):
    """Base exception for ESOP Planner errors."""


class IngestionError(EsopPlannerError):
    """Raised when an ingestion run fails.

    ``phase`` records how far the run got so callers can tell a bad file
    from a system fault.
    """

    severity = 1

    def __init__(self, phase: IngestionPhase, message: str):
        self.phase = phase
        super().__init__(message)


class ParseError(IngestionError):
    """Raised when the uploaded file cannot be read as rows.

    Storage is never touched when this is raised.
    """

    def __init__(self, file_path: str, message: str):
        self.file_path = file_path
        super().__init__(
            IngestionPhase.PARSING,
            f"Parse error for {file_path}: {message}",
        )


class StorageError(IngestionError):
    """Raised when the holding store fails during the replace write.

    Once deletion has succeeded the owner's prior holdings are gone, so a
    failure from that point on is flagged as potential data loss.
    """

    severity = 2

    def __init__(
        self,
        owner_id: str,
        phase: IngestionPhase,
        message: str,
        deleted_count: int = 0,
    ):
        self.owner_id = owner_id
        self.deleted_count = deleted_count
        super().__init__(
            phase,
            f"Storage error for owner {owner_id} during {phase.value}: {message}",
        )

    @property
    def data_loss(self) -> bool:
        return self.phase in (IngestionPhase.DELETED, IngestionPhase.INSERTING)


class ValidationError(EsopPlannerError):
    """Reserved for stricter input contracts.

    The record normalizer never raises this; it defaults malformed fields
    instead.
    """

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Validation error on '{field}': {message}")


class SimulationInputError(EsopPlannerError):
    """Reserved. Unrecognized risk tolerances fall back to medium instead."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid simulation input: {value!r}")
