"""Tracking identifiers for shipped orders."""

from __future__ import annotations

import uuid


def create_tracking_id() -> str:
    """Return a new random tracking id (UUID4, canonical string form)."""
    return str(uuid.uuid4())
