from __future__ import annotations

from uuid import uuid4


def generate_id() -> str:
    """Opaque 32-character hex identifier for obligations, transactions and projects."""
    return uuid4().hex


__all__ = ["generate_id"]
