"""Static page identifiers and resolution.

The site serves a fixed set of pages. A requested identifier is accepted
only if it matches one of them exactly.
"""

from enum import StrEnum


class PageId(StrEnum):
    """Known static pages, in navigation order."""

    HOME = "home"
    ABOUT = "about"
    CONTACT = "contact"
    PRINCESS = "princess"
    BOOK = "book"

    @property
    def page_title(self) -> str:
        return _TITLES[self]


_TITLES = {
    PageId.HOME: "Fairytale Party",
    PageId.ABOUT: "About Us",
    PageId.CONTACT: "Contact",
    PageId.PRINCESS: "Meet the Princess",
    PageId.BOOK: "Book a Party",
}

_BY_VALUE = {page.value: page for page in PageId}


class PageNotFoundError(LookupError):
    """Raised when a requested page identifier is not a known page.

    Attributes:
        requested: The raw identifier from the request, unvalidated
    """

    def __init__(self, requested: str | None) -> None:
        self.requested = requested
        super().__init__(f"No such static page: {requested!r}")


def resolve_page(requested: str | None) -> PageId:
    """Resolve a requested identifier to a known page.

    Matching is exact and case-sensitive; no trimming or case folding.

    Args:
        requested: Page identifier from the request (may be None)

    Returns:
        Matching PageId

    Raises:
        PageNotFoundError: If the identifier is not a known page
    """
    if requested is None or requested not in _BY_VALUE:
        raise PageNotFoundError(requested)
    return _BY_VALUE[requested]
