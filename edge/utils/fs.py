"""Filesystem helpers."""

import os
from pathlib import Path
from typing import Union


def atomic_write(file_path: Union[str, Path], content: Union[str, bytes]) -> None:
    """
    Write a file so readers see either the old or the new content.

    Flow:
    1. Write to <name>.tmp
    2. fsync
    3. Rename over the target (atomic on POSIX)

    Args:
        file_path: Target file path
        content: Text (written as UTF-8) or bytes
    """
    file_path = Path(file_path)
    tmp_path = file_path.with_name(file_path.name + '.tmp')

    if isinstance(content, str):
        content = content.encode('utf-8')

    with open(tmp_path, 'wb') as f:
        f.write(content)
        f.flush()
        os.fsync(f.fileno())

    tmp_path.replace(file_path)
