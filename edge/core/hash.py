"""Hash utilities for Edge."""

import hashlib
import re

ID_LENGTH = 40

_ID_PATTERN = re.compile(r'^[0-9a-f]{40}$')


def hash_object(data: bytes) -> str:
    """
    Compute the content identifier of raw bytes.
    
    Args:
        data: Bytes to hash
        
    Returns:
        40-character SHA-1 hex string
    """
    return hashlib.sha1(data).hexdigest()


def is_valid_id(value: str) -> bool:
    """Check that a string looks like a content identifier."""
    return bool(value) and _ID_PATTERN.match(value) is not None
