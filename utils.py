# utils.py
from __future__ import annotations

import logging
import re
from typing import List, Optional
from urllib.parse import quote

from schemas import PageLink

logger = logging.getLogger("storefront")

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


# ---------------------------------------------------------------------------
# Query parameter helpers
# ---------------------------------------------------------------------------

def parse_page(raw: Optional[str], default: int = 1) -> int:
    """
    Lenient page number parsing.

    Reads the leading integer the way browsers' ``parseInt`` does, so
    ``"2abc"`` and ``"2.5"`` both give 2. Anything without one becomes
    ``default`` instead of a validation error, and numbers below 1 are
    raised to 1.
    """
    match = _LEADING_INT.match(raw or "")
    if not match:
        return default
    try:
        page = int(match.group(1))
    except ValueError:
        # more digits than int() will convert
        return default
    return max(1, page)


# ---------------------------------------------------------------------------
# Pagination links
# ---------------------------------------------------------------------------

def search_pagination(total_pages: Optional[int], current_page: Optional[int], query: str) -> List[PageLink]:
    """
    Build one link descriptor per page for the search results.

    The current page is an inactive marker; every other page links back to
    ``/`` with the encoded search query. Any failure yields an empty list so
    the page still renders, just without pagination controls.

    Args:
        total_pages:  Page count; 0 or None is treated as a single page.
        current_page: Requested page, clamped into ``[1, total_pages]``.
        query:        Search string echoed into every link.
    """
    try:
        total_pages = max(1, total_pages or 1)
        current_page = min(max(1, current_page or 1), total_pages)

        encoded_query = quote(query or "", safe="!~*'()")
        links: List[PageLink] = []
        for i in range(1, total_pages + 1):
            if i == current_page:
                links.append(PageLink(number=i, active=True))
            else:
                links.append(PageLink(number=i, href=f"/?query={encoded_query}&page={i}"))
        return links
    except Exception:
        logger.exception("Error generating pagination links (total_pages=%r, current_page=%r)", total_pages, current_page)
        return []
