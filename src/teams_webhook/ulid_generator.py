"""
ULID generator for tracking webhook posts.

ULIDs are sortable by creation time and URL-safe, which makes them
convenient correlation IDs in log output.
"""

from ulid import ULID


def generate_ulid() -> str:
    """
    Generate a new ULID for request tracking.

    Returns:
        str: ULID in string format (26 characters)

    Example:
        >>> generate_ulid()
        '01JCK3Q7H8ZVXN3BARC9GWAEZM'
    """
    return str(ULID())
