"""Append-only NDJSON log of accepted reservation requests.

Each record is serialized to a single line and written with one ``write``
call on a file opened in append mode. The blocking write runs in a worker
thread so the event loop keeps serving other requests.
"""

from pathlib import Path

import anyio.to_thread

from petstay.models.reservation import ReservationRecord
from petstay.utils.logging import get_logger

logger = get_logger(__name__)


class ReservationLog:
    """Appends ReservationRecords to a newline-delimited JSON file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _write_line(self, line: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("ab") as handle:
            handle.write(line.encode("utf-8"))

    async def append(self, record: ReservationRecord) -> None:
        """Append one record as a single line.

        Raises:
            OSError: If the file cannot be opened or written.
        """
        line = record.to_log_line()
        await anyio.to_thread.run_sync(self._write_line, line)
        logger.debug("Appended reservation record to %s", self.path)
