# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core infrastructure for qsge.

This module collects the foundational helpers used across the qsge codebase:
configuration, error types, structured logging, and time-string conversions.
"""
