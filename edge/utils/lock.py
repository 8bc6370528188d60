"""Single-writer lock file for repository mutations."""

import logging
import os
from contextlib import contextmanager
from pathlib import Path

from edge.core.errors import RepositoryLockedError

logger = logging.getLogger(__name__)


def _pid_alive(pid: int) -> bool:
    if pid <= 0:
        return False
    try:
        os.kill(pid, 0)
        return True
    except PermissionError:
        # Process exists but belongs to another user
        return True
    except OSError:
        return False


def _read_pid(lock_file: Path) -> int:
    try:
        return int(lock_file.read_text(encoding='utf-8').strip() or '0')
    except (OSError, ValueError):
        return 0


@contextmanager
def repository_lock(lock_file: Path):
    """
    Hold an exclusive lock file for the duration of the block.

    The lock file records the holder's pid. A lock left behind by a dead
    process is removed; a lock held by a live process raises
    RepositoryLockedError.
    """
    lock_file = Path(lock_file)

    if lock_file.exists():
        holder = _read_pid(lock_file)
        if holder and _pid_alive(holder):
            raise RepositoryLockedError(lock_file, holder)
        logger.warning("Removing stale lock %s (pid %s)", lock_file, holder or 'unknown')
        lock_file.unlink(missing_ok=True)

    try:
        fd = os.open(lock_file, os.O_CREAT | os.O_EXCL | os.O_WRONLY)
    except FileExistsError as exc:
        raise RepositoryLockedError(lock_file, _read_pid(lock_file)) from exc

    try:
        os.write(fd, str(os.getpid()).encode('utf-8'))
        os.close(fd)
        logger.debug("Acquired lock %s", lock_file)
        yield
    finally:
        lock_file.unlink(missing_ok=True)
        logger.debug("Released lock %s", lock_file)
