"""
Seed Product Page Document

Thin query layer over a parsed product page. Knows where the vendor puts
the title, description, rating widget and the bold-label info paragraphs,
but nothing about what the values mean.
"""
from typing import Iterator, Optional, Tuple

from bs4 import BeautifulSoup, Tag

TITLE_SELECTOR = "h1"
DESCRIPTION_SELECTOR = ".product__description"
RATING_SELECTOR = "div.loox-rating"
INFO_LABEL_SELECTOR = "div.tab-content p b"


class SeedPageDocument:
    """Parsed seed product page."""

    def __init__(self, html: str):
        self.soup = BeautifulSoup(html, "html.parser")

    def title(self) -> Optional[str]:
        element = self.soup.select_one(TITLE_SELECTOR)
        if element is None:
            return None
        return element.get_text()

    def description(self) -> Optional[str]:
        element = self.soup.select_one(DESCRIPTION_SELECTOR)
        if element is None:
            return None
        return element.get_text().strip()

    def rating(self) -> Optional[Tuple[Optional[float], Optional[int]]]:
        """
        Read the review widget.

        Returns:
            (rating, votes) when the widget carries both data attributes,
            each None if it does not parse; None when there is no widget
        """
        element = self.soup.select_one(RATING_SELECTOR)
        if element is None:
            return None

        raw_rating = element.get("data-rating")
        raw_votes = element.get("data-raters")
        if raw_rating is None or raw_votes is None:
            return None

        return _parse_float(raw_rating), _parse_count(raw_votes)

    def label_pairs(self) -> Iterator[Tuple[str, str]]:
        """
        Yield (label, paragraph text) for each bold label in the info tabs.

        The paragraph text still contains the label itself.
        """
        for label_element in self.soup.select(INFO_LABEL_SELECTOR):
            parent = label_element.parent
            if not isinstance(parent, Tag):
                continue
            yield label_element.get_text(), parent.get_text()


def _parse_float(value: str) -> Optional[float]:
    try:
        return float(value)
    except ValueError:
        return None


def _parse_count(value: str) -> Optional[int]:
    if not (value.isascii() and value.isdigit()):
        return None
    return int(value)
