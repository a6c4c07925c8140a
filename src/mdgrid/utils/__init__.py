#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdgrid/utils/__init__.py
"""Utility modules for the mdgrid package."""

from mdgrid.utils.decorators import debug_timer
from mdgrid.utils.io_utils import read_source_text, write_bytes

__all__ = [
    "debug_timer",
    "read_source_text",
    "write_bytes",
]
