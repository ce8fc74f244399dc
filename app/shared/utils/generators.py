"""Identifier generation for flows and every entity they own."""

from cuid2 import cuid_wrapper

_next_cuid = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new CUID2 string.

    Used for ORM primary keys and for the fresh ids a cloned flow receives.
    """
    value = _next_cuid()
    if not isinstance(value, str):
        raise TypeError(f"cuid2 returned {type(value).__name__}, expected str")
    return value
