# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import re
from collections.abc import Iterator

from qsge_lib.core.logger import get_logger

logger = get_logger(__name__)

# Number of heading lines (column names and separator) printed by qstat.
QSTAT_HEADER_LINES = 2

# Minimal number of columns of a qstat row describing a job.
QSTAT_MIN_COLUMNS = 6

# Index of the column containing the job ID.
QSTAT_JOB_ID_COLUMN = 0

# Index of the column containing the state code.
QSTAT_STATE_COLUMN = 4

# Only LF, CRLF and CR end a line; other Unicode separators may occur inside job names.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def last_line(text: str) -> str:
    """
    Return the last non-empty line of `text`, stripped of surrounding whitespace.

    Returns an empty string if `text` contains no visible characters.
    """
    lines = [line.strip() for line in _LINE_BREAK.split(text) if line.strip()]
    return lines[-1] if lines else ""


def split_qstat_rows(text: str) -> Iterator[list[str]]:
    """
    Split the output of qstat into the columns of individual job rows.

    The heading lines are skipped unconditionally. Rows with fewer than
    `QSTAT_MIN_COLUMNS` columns are dropped.

    Args:
        text (str): Standard output of qstat.

    Yields:
        list[str]: Whitespace-separated columns of one job row.
    """
    for index, row in enumerate(_LINE_BREAK.split(text)):
        if index < QSTAT_HEADER_LINES:
            continue

        if not row.strip():
            continue

        columns = row.split()
        if len(columns) < QSTAT_MIN_COLUMNS:
            logger.debug(f"Skipping malformed qstat row: '{row}'.")
            continue

        yield columns
