from dataclasses import dataclass
from typing import Optional

from .cli_logger import logger
from .errors import GofindError, SearchAborted
from .extractor import extract_page
from .fetcher import fetch_page
from .query import encode_query


@dataclass(frozen=True)
class Fetching:
    page: int


@dataclass(frozen=True)
class Done:
    pass


@dataclass(frozen=True)
class Failed:
    error: Exception


def advance(page, total: Optional[int], all_pages: bool):
    """
    Returns the state that follows a successfully extracted ``page``.

    ``total`` is the page count reported by that page, so a total that
    changes between pages is honoured. An unknown total means the page
    just read was the last one.
    """
    if not all_pages:
        return Done()
    if total is None or page >= total:
        return Done()
    return Fetching(page + 1)


class SearchAggregator:
    """Fetches result pages in order and concatenates their records."""

    def __init__(self, config, fetch=fetch_page, extract=extract_page):
        self.config = config
        self.fetch = fetch
        self.extract = extract
        self.encoded_query = encode_query(config.terms)

    def step(self, state: Fetching, records):
        try:
            html = self.fetch(
                self.encoded_query, state.page,
                endpoint=self.config.endpoint, timeout=self.config.timeout,
            )
            result = self.extract(html)
        except GofindError as e:
            logger.debug(f"Page {state.page} failed: {e}")
            return Failed(e)
        records.extend(result.records)
        logger.info(
            f"Page {state.page}: {len(result.records)} results"
            f" (pages reported: {result.total or 1})"
        )
        return advance(state.page, result.total, self.config.all_pages)

    def run(self):
        records = []
        state = Fetching(1)
        while isinstance(state, Fetching):
            state = self.step(state, records)
        if isinstance(state, Failed):
            raise SearchAborted(records, state.error) from state.error
        logger.info(f"Found {len(records)} results")
        return records
