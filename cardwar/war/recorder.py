"""Writing round records to the result CSV."""

import csv
import logging
import os
import tempfile
from typing import Iterable

from cardwar.war.constants import OUTPUT_HEADER
from cardwar.war.errors import FileError
from cardwar.war.game import RoundRecord

logger = logging.getLogger(__name__)


def _current_umask() -> int:
    # os.umask can only be read by setting it
    umask = os.umask(0)
    os.umask(umask)
    return umask


def write_records(records: Iterable[RoundRecord], stream) -> int:
    """Write the header and one row per record to an open text stream."""
    writer = csv.writer(stream)
    writer.writerow(OUTPUT_HEADER)
    count = 0
    for record in records:
        writer.writerow(record.to_row())
        count += 1
    return count


def write_results(records: Iterable[RoundRecord], path) -> None:
    """
    Write round records to ``path`` as CSV.

    The rows go to a temporary file next to ``path`` which then replaces it,
    so the destination is never left half written.

    :raises FileError: If the file cannot be written.
    """
    path = os.fspath(path)
    directory = os.path.dirname(os.path.abspath(path))
    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(
            prefix=".cardwar-", suffix=".csv.tmp", dir=directory
        )
        with os.fdopen(fd, "w", newline="", encoding="utf-8") as stream:
            count = write_records(records, stream)
        # mkstemp creates the file owner-only; match what open() would give
        os.chmod(tmp_path, 0o666 & ~_current_umask())
        os.replace(tmp_path, path)
    except OSError as exc:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise FileError(f"Failed to write output CSV {path}: {exc}") from exc

    logger.info("Wrote %d rounds to %s", count, path)
