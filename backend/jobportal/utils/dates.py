from datetime import datetime, timezone


def utcnow() -> datetime:
    """Текущее время в UTC"""
    return datetime.now(timezone.utc)
