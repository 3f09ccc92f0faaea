"""Short key encoding utilities."""

import string


# Lowercase hexadecimal, as produced by format(n, "x")
HEX_CHARS = string.digits + "abcdef"


def key_for_index(index: int) -> str:
    """Render an entry index as a short key.

    Args:
        index: Zero-based position of the entry in issue order

    Returns:
        Lowercase hexadecimal key ("0", "1", ..., "f", "10", ...)

    Raises:
        ValueError: If index is negative
    """
    if index < 0:
        raise ValueError(f"Index must be non-negative, got {index}")
    return format(index, "x")
