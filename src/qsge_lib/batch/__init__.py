# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Grid-engine support for qsge.

This module groups the abstract grid-engine interface together with the
concrete SGE backend.
"""
