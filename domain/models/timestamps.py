from datetime import datetime, timezone


def utcnow() -> datetime:
    """Timezone-aware creation timestamp for new rows."""
    return datetime.now(timezone.utc)
