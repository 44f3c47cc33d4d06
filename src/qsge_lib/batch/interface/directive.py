# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass


@dataclass(frozen=True)
class Directive:
    """
    A single submission directive: a flag and its value.

    An empty value denotes a boolean flag (e.g. `-V`).
    """

    flag: str
    value: str = ""

    def toTokens(self) -> list[str]:
        """Return the directive as command-line tokens, omitting an empty value."""
        return [self.flag, self.value] if self.value else [self.flag]

    def __str__(self) -> str:
        return " ".join(self.toTokens())
