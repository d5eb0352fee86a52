"""Storage interface and result type for holdings ingestion."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from esopplan.models.enums import IngestionPhase
from esopplan.models.holding import HoldingRecord


@dataclass
class IngestResult:
    """Bundles the output of a completed ingestion run."""

    records: list[HoldingRecord] = field(default_factory=list)
    success: bool = False
    deleted_count: int = 0
    phase: IngestionPhase = IngestionPhase.PARSING


class HoldingStore(ABC):
    """Keyed record store the ingestion pipeline writes through."""

    @abstractmethod
    def find_count_by_owner(self, owner_id: str) -> int:
        """Number of holdings currently stored for an owner."""
        ...

    @abstractmethod
    def delete_all_by_owner(self, owner_id: str) -> int:
        """Delete every holding for an owner. Returns the number deleted."""
        ...

    @abstractmethod
    def insert_many(self, records: list[HoldingRecord]) -> list[HoldingRecord]:
        """Insert a batch of holdings. Returns the inserted records."""
        ...

    @abstractmethod
    def get_holdings(self, owner_id: str) -> list[HoldingRecord]:
        """Retrieve an owner's holdings in insertion order."""
        ...
