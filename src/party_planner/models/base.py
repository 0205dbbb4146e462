from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current time in UTC without tzinfo.

    Timestamp columns are declared with SQLAlchemy's plain ``DateTime``
    (TIMESTAMP WITHOUT TIME ZONE) and always hold naive UTC values.
    """
    return datetime.now(UTC).replace(tzinfo=None)
