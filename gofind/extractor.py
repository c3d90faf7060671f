from dataclasses import dataclass
from typing import Optional, Tuple

from .cli_logger import logger
from .document import parse_document

SNIPPET_SELECTOR = ".SearchSnippet"
NAME_SELECTOR = ".SearchSnippet-headerContainer h2"
SYNOPSIS_SELECTOR = ".SearchSnippet-synopsis"
INFO_SELECTOR = ".SearchSnippet-infoLabel"
PAGINATION_SELECTOR = ".Pagination-number"

INFO_SEPARATOR = " | "


@dataclass(frozen=True)
class SearchRecord:
    name: str
    synopsis: str = ""
    info: str = ""


@dataclass(frozen=True)
class PageResult:
    records: Tuple[SearchRecord, ...]
    # None when the page has no pagination control, i.e. it is the only page.
    total: Optional[int]


def normalize_info(raw):
    """
    Normalizes a pipe-delimited list of ``label: value`` segments.

    Both halves of each segment are trimmed and rejoined as ``label: value``.
    Segments without a colon are dropped.
    """
    segments = []
    for segment in raw.split("|"):
        label, sep, value = segment.partition(":")
        if not sep:
            if segment.strip():
                logger.debug(f"Dropping info segment without a label: {segment.strip()!r}")
            continue
        segments.append(f"{label.strip()}: {value.strip()}")
    return INFO_SEPARATOR.join(segments)


def parse_total(text):
    try:
        total = int(text.strip())
    except (AttributeError, ValueError):
        return None
    return total if total > 0 else None


def extract_records(doc):
    records = []
    for snippet in doc.select(SNIPPET_SELECTOR):
        records.append(SearchRecord(
            name=doc.text_of(NAME_SELECTOR, within=snippet),
            synopsis=doc.text_of(SYNOPSIS_SELECTOR, within=snippet),
            info=normalize_info(doc.text_of(INFO_SELECTOR, within=snippet)),
        ))
    return records


def extract_total(doc):
    numbers = doc.select(PAGINATION_SELECTOR)
    if not numbers:
        return None
    return parse_total(doc.text(numbers[-1]))


def extract_page(html):
    """Parses one results page into its records and the advertised page total."""
    doc = parse_document(html)
    return PageResult(records=tuple(extract_records(doc)), total=extract_total(doc))
