"""Shared utilities: cross-cutting helpers (ids, datetimes).

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.utils import ensure_utc, generate_cuid, utc_now

__all__ = [
    "generate_cuid",
    "utc_now",
    "ensure_utc",
]
