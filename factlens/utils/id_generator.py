"""
ID generation utilities for the application.

Uses NanoID for generating short, URL-safe unique identifiers.
"""

from nanoid import generate


def generate_request_id() -> str:
    """
    generate a unique request ID using NanoID, used to correlate request logs.

    example:
        >>> request_id = generate_request_id()
        >>> len(request_id)
        12
    """
    return generate(size=12)


def generate_upload_id() -> str:
    """short random suffix for temporary upload file names (10 characters)"""
    return generate(size=10)
