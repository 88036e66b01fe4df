"""
Infrastructure package for the college counseling allocator.

Centralizes file access (indirection resolution, dataset loading). Keep this
layer focused on I/O and resource handling, decoupled from strategy logic.
"""

from counseling.infrastructure.files import (
    ensure_readable,
    load_interval_table,
    resolve_dataset_path,
)

__all__ = [
    "ensure_readable",
    "load_interval_table",
    "resolve_dataset_path",
]
