import requests

from .cli_logger import logger
from .config import SEARCH_ENDPOINT
from .errors import RemoteStatusError, TransportError

HEADERS = {"Accept": "text/html"}


def page_url(encoded_query, page, endpoint=SEARCH_ENDPOINT):
    return f"{endpoint}?{encoded_query}&page={page}"


def fetch_page(encoded_query, page, endpoint=SEARCH_ENDPOINT, timeout=None):
    """
    Fetches one page of search results and returns its HTML.

    The connection is released before this returns, whether the body was
    read or an error was raised.
    """
    url = page_url(encoded_query, page, endpoint)
    logger.debug(f"GET {url}")
    try:
        with requests.get(url, headers=HEADERS, stream=True, timeout=timeout) as resp:
            logger.debug(f"{resp.status_code} {resp.reason} for page {page}")
            if resp.status_code != 200:
                raise RemoteStatusError(resp.status_code, resp.reason)
            return resp.text
    except requests.exceptions.RequestException as e:
        raise TransportError(e) from e
