"""Query parameter parsing for the /logs endpoint.

Unknown priorities and sort orders are errors the caller should see.
A bad ``since`` value is forgiven and treated as "no filter".
"""

from tierlog.core.models import Priority, Sort


def _parse_since_param(value: str | None) -> int:
    """Parse and validate the 'since' query parameter.

    Args:
        value: Raw parameter value, or None when absent.

    Returns:
        Nanosecond timestamp, defaulting to 0 if invalid, negative or missing.
    """
    if value is None:
        return 0
    try:
        since = int(value)
    except ValueError:
        return 0
    return max(since, 0)


def _parse_priority_param(value: str | None) -> Priority | None:
    """Parse the 'priority' query parameter.

    Returns:
        The requested tier, or None to include all tiers.

    Raises:
        ParseError: If the value names no priority.
    """
    if not value:
        return None
    return Priority.parse(value)


def _parse_sort_param(value: str | None) -> Sort | None:
    """Parse the 'sort' query parameter.

    Returns:
        The requested order, or None to leave entries in export order.

    Raises:
        ParseError: If the value is not "asc" or "desc".
    """
    if not value:
        return None
    return Sort.parse(value)
