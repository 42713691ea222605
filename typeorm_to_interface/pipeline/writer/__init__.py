"""
Writer module.

Writes generated artifacts to disk atomically.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter

__all__ = [
    "AtomicWriter",
]
