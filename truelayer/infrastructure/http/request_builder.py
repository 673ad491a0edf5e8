"""URL, query string and form body construction."""

from datetime import datetime, timezone
from typing import Any, Dict, Mapping
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

from truelayer.domain.exceptions import InvalidDateRange, MalformedURL

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def build_url(
    base_url: str,
    path_template: str = "",
    *path_args: Any,
    query: Mapping[str, Any] | None = None,
) -> str:
    """
    Combine a base URL, a path template and an optional query.

    Path arguments are percent-encoded before substitution so an identifier
    can never change the path structure. A path already present on the base
    URL is kept as a prefix.

    Raises:
        MalformedURL: If the base URL has no scheme or host, or a bad port
    """
    try:
        parts = urlsplit(base_url)
        parts.port
    except ValueError as exc:
        raise MalformedURL(base_url) from exc

    if parts.scheme not in ("http", "https") or not parts.hostname:
        raise MalformedURL(base_url)

    path = path_template.format(*(quote(str(arg), safe="") for arg in path_args))
    return urlunsplit(
        (
            parts.scheme,
            parts.netloc,
            parts.path.rstrip("/") + path,
            build_query(query) if query else "",
            "",
        )
    )


def build_query(params: Mapping[str, Any]) -> str:
    """Encode params with keys in alphabetical order, skipping None values."""
    return urlencode(
        sorted((key, value) for key, value in params.items() if value is not None)
    )


def build_form_body(fields: Mapping[str, str]) -> bytes:
    """Encode token endpoint fields as an x-www-form-urlencoded body."""
    return build_query(fields).encode("ascii")


def format_rfc3339(value: datetime) -> str:
    """Render a datetime as RFC3339, treating naive values as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat().replace("+00:00", "Z")


def build_date_range(
    from_date: datetime | None,
    to_date: datetime | None,
) -> Dict[str, str]:
    """
    Build the ``from``/``to`` transaction filter.

    Returns an empty dict when neither bound is given.

    Raises:
        InvalidDateRange: If only one bound is given, or from is after to
    """
    if from_date is None and to_date is None:
        return {}

    if from_date is None or to_date is None:
        raise InvalidDateRange(
            "Both 'from' and 'to' must be provided to filter by date"
        )

    start = _as_utc(from_date)
    end = _as_utc(to_date)
    if start > end:
        raise InvalidDateRange(
            f"'from' ({format_rfc3339(start)}) is after 'to' ({format_rfc3339(end)})"
        )

    return {"from": format_rfc3339(from_date), "to": format_rfc3339(to_date)}


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
