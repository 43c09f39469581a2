from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Identity:
    """Represents the authenticated caller of a request."""

    user_id: str
    name: str
