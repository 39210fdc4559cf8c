import logging
from pathlib import Path
from typing import List

from weatherlog.codec import decode_line, encode_record
from weatherlog.errors import StoreIOError
from weatherlog.models import Record

logger = logging.getLogger(__name__)


def ensure_dir(path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as ex:
        raise StoreIOError(str(ex)) from ex


def init_store(path: Path) -> None:
    """Create the store, or truncate it if it already exists."""
    ensure_dir(path)
    try:
        with path.open("w", encoding="utf-8"):
            pass
    except OSError as ex:
        raise StoreIOError(str(ex)) from ex
    logger.debug("initialized empty store at %s", path)


def append_record(rec: Record, path: Path) -> None:
    ensure_dir(path)
    line = encode_record(rec)
    try:
        with path.open("a", encoding="utf-8") as f:
            f.write(line + "\n")
            f.flush()
    except OSError as ex:
        raise StoreIOError(str(ex)) from ex
    logger.debug("appended %r to %s", line, path)


def read_all_records(path: Path) -> List[Record]:
    """
    Load every record in file order.

    A missing store reads as empty. The first malformed line aborts the read.
    """
    records: List[Record] = []
    if not path.exists():
        logger.debug("no store at %s, treating as empty", path)
        return records
    try:
        data = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as ex:
        raise StoreIOError(f"cannot read {path}: {ex}") from ex
    for line in data.split("\n"):
        if not line.strip():
            continue
        records.append(decode_line(line))
    logger.debug("read %d records from %s", len(records), path)
    return records
