"""
Snapshot import and export.
"""

from .snapshot import (
    SnapshotFormatError,
    SystemSnapshot,
    decode_snapshot,
    encode_snapshot,
    restore_universe,
    to_snapshot,
)

__all__ = ['SnapshotFormatError', 'SystemSnapshot', 'decode_snapshot',
           'encode_snapshot', 'restore_universe', 'to_snapshot']
