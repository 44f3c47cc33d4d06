# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from enum import Enum
from types import MappingProxyType
from typing import Self

from qsge_lib.core.config import CFG
from qsge_lib.core.logger import get_logger

logger = get_logger(__name__)


class QueueStatus(Enum):
    """
    State of a job as reported by the SGE status listing.

    Whether a state is terminal is decided by the consumer of the queue snapshot,
    not here. UNKNOWN means "could not decode, query again", never "finished".
    """

    RUNNING = 1
    PENDING = 2
    HOLD = 3
    ERROR = 4
    UNKNOWN = 5

    def __str__(self) -> str:
        """
        Return the lowercase string representation of the enum variant.

        Returns:
            str: The name of the state in lowercase.
        """
        return self.name.lower()

    @classmethod
    def fromCode(cls, code: str) -> Self:
        """
        Convert a raw SGE state code (as shown by qstat) to a QueueStatus.

        Codes are case-sensitive.

        Args:
            code (str): One- to three-character state code, e.g. 'r' or 'Eqw'.

        Returns:
            QueueStatus: Corresponding enum variant, or UNKNOWN if the code is not recognized.
        """
        try:
            return STATUS_CODES[code]
        except KeyError:
            # unmapped codes must never leak out as a missing state
            logger.debug(f"Unrecognized SGE state code '{code}'.")
            return cls.UNKNOWN

    @property
    def color(self) -> str:
        """
        Return the display color associated with this QueueStatus.

        Returns:
            str: A string representing the color for presentation purposes.
        """
        return getattr(CFG.state_colors, self.name.lower())


# Decoding of the SGE state codes. Read-only, shared by all callers.
STATUS_CODES: MappingProxyType[str, QueueStatus] = MappingProxyType(
    {
        "t": QueueStatus.RUNNING,
        "r": QueueStatus.RUNNING,
        "R": QueueStatus.RUNNING,
        "hr": QueueStatus.RUNNING,
        "qw": QueueStatus.PENDING,
        "h": QueueStatus.PENDING,
        "w": QueueStatus.PENDING,
        "P": QueueStatus.PENDING,
        "N": QueueStatus.PENDING,
        "S": QueueStatus.HOLD,
        "s": QueueStatus.HOLD,
        "T": QueueStatus.HOLD,
        "Tr": QueueStatus.HOLD,
        "hqw": QueueStatus.HOLD,
        "Eqw": QueueStatus.ERROR,
        "E": QueueStatus.ERROR,
    }
)
