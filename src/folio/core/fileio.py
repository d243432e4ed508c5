"""
Safe file writing utilities.

Generated pages and manifests are written to a temporary file in the target
directory first and then moved into place, so a failed write never leaves a
half-written page behind.
"""

from __future__ import annotations

import contextlib
import json
import os
import tempfile
from pathlib import Path
from typing import Any


def safe_write_text(file_path: Path, content: str, encoding: str = "utf-8") -> Path:
    """Atomically write text to a file.

    Args:
        file_path: Destination file (parent directories are created)
        content: Text to write
        encoding: Text encoding

    Returns:
        The destination path

    Raises:
        OSError: If file operations fail
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    # Write to temporary file in same directory (for atomic move)
    temp_fd, temp_path = tempfile.mkstemp(
        suffix=file_path.suffix,
        prefix=f".{file_path.name}.",
        dir=file_path.parent,
        text=True,
    )

    try:
        with os.fdopen(temp_fd, "w", encoding=encoding) as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())

        Path(temp_path).replace(file_path)

    except Exception as e:
        with contextlib.suppress(OSError):
            Path(temp_path).unlink()
        raise OSError(f"Failed to write {file_path}: {e}") from e

    return file_path


def safe_write_json(
    file_path: Path,
    data: Any,
    indent: int = 2,
    ensure_ascii: bool = False,
) -> Path:
    """Atomically write JSON data to a file.

    Raises:
        ValueError: If data cannot be serialized to JSON
        OSError: If file operations fail
    """
    try:
        json_str = json.dumps(data, indent=indent, ensure_ascii=ensure_ascii)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Cannot serialize data to JSON: {e}") from e

    return safe_write_text(file_path, json_str + "\n")
