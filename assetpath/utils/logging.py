from collections.abc import Mapping
from typing import Any, Optional


def get_page_value(page: Any, key: str) -> Optional[Any]:
    """
    Read a value from a page, which may be a mapping or an object.

    Template contexts commonly carry pages as plain dictionaries (front matter),
    while Python callers tend to pass objects. Missing values read as None.

    Args:
        page (Any): The current page, or None.
        key (str): The value to read (e.g. "id" or "url").

    Returns:
        The value, or None if the page is missing or lacks the key.
    """
    if page is None:
        return None

    if isinstance(page, Mapping):
        return page.get(key)

    return getattr(page, key, None)


def get_logging_page_id(page: Any) -> Optional[str]:
    """
    Return a consistent identifier for a page for logging purposes.

    Args:
        page (Any): The page being rendered (mapping or object).

    Returns:
        page_id (str): The page's id, falling back to its url, or None if
                       neither is available.
    """
    page_id = get_page_value(page, "id") or get_page_value(page, "url")
    if not page_id:
        return None

    return str(page_id)
