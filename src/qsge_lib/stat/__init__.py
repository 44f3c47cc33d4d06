# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Presentation of SGE queue snapshots.

This module defines the `StatPresenter` class, which renders a snapshot
decoded from `qstat` output as a compact colored table or as YAML.
"""

from .presenter import StatPresenter

__all__ = [
    "StatPresenter",
]
