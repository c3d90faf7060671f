import abc

from bs4 import BeautifulSoup

from .errors import ParseError


class Document(abc.ABC):
    """A parsed page that can be queried with CSS selectors."""

    @abc.abstractmethod
    def select(self, selector, within=None):
        """Return all elements matching ``selector``, in document order.

        When ``within`` is given, only its descendants are searched.
        """

    @abc.abstractmethod
    def text(self, element):
        """Return the text content of ``element`` on one line, whitespace runs collapsed."""

    def select_one(self, selector, within=None):
        found = self.select(selector, within)
        return found[0] if found else None

    def text_of(self, selector, within=None):
        """Trimmed text of the first match, or "" if nothing matches."""
        element = self.select_one(selector, within)
        if element is None:
            return ""
        return self.text(element)


class SoupDocument(Document):
    def __init__(self, soup):
        self.soup = soup

    def select(self, selector, within=None):
        root = self.soup if within is None else within
        return root.select(selector)

    def text(self, element):
        # markup line breaks and indentation collapse to single spaces
        return " ".join(element.get_text().split())


def parse_document(html):
    if html is None:
        raise ParseError("no document to parse")
    try:
        return SoupDocument(BeautifulSoup(html, "html.parser"))
    except Exception as e:
        raise ParseError(f"could not parse HTML: {e}") from e
