"""Link extraction: turns page HTML into the ordered list of ``href`` values."""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup


def extract_links(html: str) -> List[str]:
    """Return every ``<a href>`` value in *html*, in document order.

    Nothing is filtered or deduplicated: relative links, fragments and
    non-archive links are all returned so the selector sees exactly what the
    page offers.
    """
    soup = BeautifulSoup(html, "html.parser")
    return [str(a["href"]) for a in soup.find_all("a", href=True)]
