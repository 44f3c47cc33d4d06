# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Exception types used throughout qsge.

Every exception carries an exit code which the qsge commands use to report
failures consistently.
"""

from qsge_lib.core.config import CFG


class QSGEError(Exception):
    """Common exception type for all recoverable qsge errors."""

    exit_code = CFG.exit_codes.default


class InvalidSubmitResponse(QSGEError):
    """
    Raised when the output of the submission command matches none of the
    recognized response formats.

    The complete raw output is kept in `raw_text` for diagnosis.
    """

    exit_code = CFG.exit_codes.invalid_submit_response

    def __init__(self, raw_text: str):
        super().__init__(f"Invalid SGE submit response:\n{raw_text}\n")
        self.raw_text = raw_text
