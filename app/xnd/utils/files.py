"""Atomic file writes.

Every file xnd owns (manifest, store metadata, user config) is replaced
in one step so that a reader never observes a half-written file.
"""

import json
import os
import shutil
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any


def _current_umask() -> int:
    """Read the process umask (os.umask can only be read by setting it)."""
    mask = os.umask(0o022)
    os.umask(mask)
    return mask


def write_atomic(path: Path, data: bytes, mode: int | None = None) -> None:
    """Write bytes to a file atomically.

    The data is first written to a temporary file in the same directory
    and then moved into place with os.replace(). The temporary file is
    cleaned up on failure.

    Without an explicit mode the result keeps the permissions of the file
    it replaces, or gets the umask default (0o666 & ~umask) when new.

    Args:
        path: Destination file. Its parent directory must exist.
        data: Content to write.
        mode: Permission bits to set on the result.

    Raises:
        OSError: If the temporary file cannot be written or moved.
    """
    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            tmp_path = Path(f.name)
            f.write(data)
        if mode is not None:
            os.chmod(tmp_path, mode)
        elif path.exists():
            shutil.copymode(path, tmp_path)
        else:
            os.chmod(tmp_path, 0o666 & ~_current_umask())
        os.replace(tmp_path, path)
    except OSError:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise


def dump_json(data: Any) -> bytes:
    """Serialize data as 2-space indented JSON with a trailing newline.

    Output is deterministic for equal input, so rewriting unchanged data
    leaves the file byte-identical.
    """
    return (json.dumps(data, indent=2, ensure_ascii=False) + "\n").encode("utf-8")
