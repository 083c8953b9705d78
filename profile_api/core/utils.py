from datetime import datetime, timezone


def utc_timestamp() -> str:
    """Current UTC time as ISO 8601 with a trailing Z."""
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
