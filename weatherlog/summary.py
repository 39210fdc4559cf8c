# weatherlog/summary.py
import logging
import re
from typing import Iterable, Optional

from weatherlog.models import Record, Summary

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2 ** 63)
_INT_MAX = 2 ** 63 - 1


def parse_int(value: Optional[str]) -> Optional[int]:
    """Strict signed 64-bit integer parse; None for anything else."""
    if value is None or not _INT_RE.fullmatch(value):
        return None
    n = int(value)
    if not _INT_MIN <= n <= _INT_MAX:
        return None
    return n


def summarize(records: Iterable[Record], numeric_field: Optional[str] = "high") -> Summary:
    records = list(records)
    if numeric_field is None:
        return Summary(count=len(records))

    total = 0
    ignored = 0
    for r in records:
        n = parse_int(r.get(numeric_field))
        # Missing, empty and non-numeric values count as zero.
        if n is None:
            ignored += 1
            continue
        total += n
    if ignored:
        logger.debug("%d of %d %s values were not integers", ignored, len(records), numeric_field)
    return Summary(count=len(records), field=numeric_field, total=total)


def summarize_records(records: Iterable[Record], numeric_field: Optional[str] = "high") -> str:
    return summarize(records, numeric_field).line()
