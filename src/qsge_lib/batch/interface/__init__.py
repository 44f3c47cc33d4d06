# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Abstractions for translating tasks into grid-engine submissions.

This module defines the contract that every grid-engine backend implements:

- `GridInterface`: building submission directives and script headers,
  assembling the submission, kill, and status commands, and parsing the
  textual output of the scheduler into job IDs and queue snapshots.

- `Directive`: a single flag/value pair of a submission header.
"""

from .directive import Directive
from .interface import GridInterface

__all__ = [
    "Directive",
    "GridInterface",
]
