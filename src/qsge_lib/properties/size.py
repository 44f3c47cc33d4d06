# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import re
from dataclasses import dataclass
from typing import Self

from qsge_lib.core.error import QSGEError


@dataclass(init=False, frozen=True)
class Size:
    """
    Represents a memory size.

    The value is stored internally in kilobytes (kB) using binary units,
    i.e. 1 mb = 1024 kb. When converted to a string, it is displayed in the
    largest unit that represents it exactly.
    """

    value: int

    _unit_map = {
        "kb": 1,
        "mb": 1024,
        "gb": 1024 * 1024,
        "tb": 1024 * 1024 * 1024,
        "pb": 1024 * 1024 * 1024 * 1024,
    }

    def __init__(self, value: int, unit: str = "kb"):
        unit = unit.lower()
        if unit not in self._unit_map:
            raise QSGEError(f"Unsupported unit for size '{unit}'.")
        if value < 0:
            raise QSGEError(f"Size cannot be negative: '{value}{unit}'.")

        object.__setattr__(self, "value", value * self._unit_map[unit])

    @classmethod
    def fromString(cls, s: str) -> Self:
        """
        Create a Size object from a string.

        Args:
            s (str): A string representation of the size, e.g., "10gb", "10 gb", "10g", "10G".

        Returns:
            Size: A Size instance with parsed value and unit.

        Raises:
            QSGEError: If the string cannot be parsed or contains an invalid unit.
        """
        match = re.match(r"^\s*(\d+)\s*([a-zA-Z]+)\s*$", s)
        if not match:
            raise QSGEError(f"Invalid size string: '{s}'.")
        value, unit = match.groups()

        # single-letter units are shorthands, e.g. 'g' for 'gb'
        if len(unit) == 1:
            unit = unit.lower() + "b"

        return cls(int(value), unit)

    def toGiga(self) -> int:
        """
        Return the size expressed in whole gigabytes (GiB).

        Any remainder smaller than one gigabyte is discarded.
        """
        return self.value // self._unit_map["gb"]

    def __str__(self) -> str:
        for unit, factor in reversed(self._unit_map.items()):
            if self.value >= factor and self.value % factor == 0:
                return f"{self.value // factor}{unit}"

        return f"{self.value}kb"
