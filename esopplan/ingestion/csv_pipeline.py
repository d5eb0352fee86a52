"""CSV ingestion pipeline: stream rows, normalize, replace stored holdings."""

import csv
import logging
from pathlib import Path

from esopplan.exceptions import ParseError, StorageError
from esopplan.ingestion.base import HoldingStore, IngestResult
from esopplan.models.enums import IngestionPhase
from esopplan.models.holding import HoldingRecord
from esopplan.normalization.records import normalize_row

logger = logging.getLogger(__name__)


class IngestionPipeline:
    """Replaces an owner's holdings with the contents of an uploaded CSV.

    This is destructive: the owner's previous holdings are deleted before
    the new batch is inserted. The two writes are not atomic, so callers
    must not run two ingestions for the same owner at once.
    """

    def __init__(self, store: HoldingStore, encoding: str = "utf-8-sig"):
        self.store = store
        self.encoding = encoding

    def ingest(self, file_path: Path | str, owner_id: str) -> IngestResult:
        """Parse ``file_path`` and replace ``owner_id``'s holdings with it.

        Raises:
            ParseError: the file could not be read; storage is untouched.
            StorageError: the store failed; ``data_loss`` tells whether the
                previous holdings were already deleted.
        """
        file_path = Path(file_path)
        logger.info("Starting to parse CSV file %s for owner %s", file_path, owner_id)
        records = self.parse(file_path, owner_id)
        logger.info("CSV parsing complete. Parsed %d records", len(records))
        return self._replace(owner_id, records)

    def parse(self, file_path: Path, owner_id: str) -> list[HoldingRecord]:
        """Read every row of the file into normalized records, in file order."""
        records: list[HoldingRecord] = []
        try:
            with file_path.open(newline="", encoding=self.encoding) as fh:
                reader = csv.DictReader(fh)
                for row_number, row in enumerate(reader, start=1):
                    record = normalize_row(row, owner_id)
                    logger.debug(
                        "Processed row %d: ticker=%s, grants=%d, vested=%d, "
                        "unvested=%d, type=%s",
                        row_number,
                        record.ticker,
                        record.total_grants,
                        record.vested,
                        record.unvested,
                        record.type,
                    )
                    records.append(record)
        except (OSError, UnicodeDecodeError, csv.Error) as exc:
            logger.error("CSV parsing error for %s: %s", file_path, exc)
            raise ParseError(str(file_path), str(exc)) from exc
        return records

    def _replace(self, owner_id: str, records: list[HoldingRecord]) -> IngestResult:
        """Delete-then-insert, tracking the phase reached for error reporting."""
        phase = IngestionPhase.PENDING_DELETE
        deleted = 0
        try:
            existing = self.store.find_count_by_owner(owner_id)
            logger.info("Found %d existing records for deletion", existing)

            deleted = self.store.delete_all_by_owner(owner_id)
            phase = IngestionPhase.DELETED
            logger.info("Deleted %d old records for owner %s", deleted, owner_id)

            saved: list[HoldingRecord] = []
            if records:
                phase = IngestionPhase.INSERTING
                saved = self.store.insert_many(records)
            phase = IngestionPhase.COMMITTED
            logger.info("Successfully inserted %d new records", len(saved))
        except Exception as exc:
            logger.error(
                "Storage failure for owner %s during %s: %s", owner_id, phase.value, exc
            )
            raise StorageError(owner_id, phase, str(exc), deleted_count=deleted) from exc

        return IngestResult(
            records=saved,
            success=True,
            deleted_count=deleted,
            phase=phase,
        )
