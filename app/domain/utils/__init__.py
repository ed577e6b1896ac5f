"""Small helpers shared by domain entities."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Naive UTC timestamp, matching the TIMESTAMP WITHOUT TIME ZONE columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


__all__ = ["utc_now"]
