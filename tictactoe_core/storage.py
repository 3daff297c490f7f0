from __future__ import annotations

import logging
import os

from .snapshot import Snapshot, SnapshotError, dump_snapshot, parse_snapshot

DEFAULT_SAVE_NAME = 'tic-tac-toe.json'

log = logging.getLogger(__name__)


def _ensure_dir(path: str) -> None:
    """Ensures the directory for a snapshot file exists before writing."""
    directory = os.path.dirname(path)
    if directory and not os.path.exists(directory):
        os.makedirs(directory, exist_ok=True)


def resolve_save_path(save_dir: str, name: str | None = None) -> str:
    """Maps a user-supplied file name into save_dir. Directory parts are dropped."""
    base = os.path.basename((name or '').replace('\\', '/').strip())
    if not base or base in ('.', '..'):
        base = DEFAULT_SAVE_NAME
    if not base.lower().endswith('.json'):
        base += '.json'
    return os.path.join(save_dir, base)


def save_snapshot(path: str, snapshot: Snapshot) -> None:
    """Writes the snapshot as indented JSON. OSError propagates to the caller."""
    _ensure_dir(path)
    text = dump_snapshot(snapshot)
    # Old save stays intact until os.replace.
    tmp = f"{path}.tmp"
    try:
        with open(tmp, 'w', encoding='utf-8') as f:
            f.write(text)
        os.replace(tmp, path)
    except OSError:
        if os.path.exists(tmp):
            os.remove(tmp)
        raise
    log.debug("saved snapshot to %s", path)


def load_snapshot(path: str) -> Snapshot:
    """Reads a snapshot file. Raises OSError on I/O failure, SnapshotError on bad content."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise SnapshotError(f"not UTF-8 text: {e}") from e
    snapshot = parse_snapshot(text)
    log.debug("loaded snapshot from %s", path)
    return snapshot
