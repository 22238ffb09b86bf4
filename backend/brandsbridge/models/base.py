from datetime import datetime, timezone


def utcnow() -> datetime:
    """Timezone-aware UTC timestamp for created_at/updated_at/responded_at."""
    return datetime.now(timezone.utc)
