from datetime import datetime, timezone


def utcnow() -> datetime:
    """Column default for created_at / updated_at (microsecond precision)"""
    return datetime.now(timezone.utc)
