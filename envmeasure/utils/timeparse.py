from datetime import datetime, timezone


def parse_iso8601(value):
    """Parse an ISO-8601 string into an aware UTC datetime. Naive input is taken as UTC."""
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f'Expected an ISO-8601 string, got {value!r}')

    text = value.strip()
    if text.endswith(('Z', 'z')):
        text = text[:-1] + '+00:00'
    dt = datetime.fromisoformat(text)

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def isoformat_utc(dt):
    """Render a datetime as UTC ISO-8601 with a Z suffix. Naive values (SQLite) are UTC."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat().replace('+00:00', 'Z')


def utcnow():
    return datetime.now(timezone.utc)
