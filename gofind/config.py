from dataclasses import dataclass
from typing import Optional, Tuple

SEARCH_ENDPOINT = "https://pkg.go.dev/search"
LINE_WIDTH = 80


@dataclass(frozen=True)
class SearchConfig:
    """Options for one gofind invocation, built once from the command line."""

    terms: Tuple[str, ...] = ()
    all_pages: bool = False
    raw: bool = False
    verbose: bool = False
    endpoint: str = SEARCH_ENDPOINT
    timeout: Optional[float] = None
    width: int = LINE_WIDTH

    @classmethod
    def from_options(cls, query, all_pages=False, raw=False, verbose=False, **overrides):
        return cls(
            terms=tuple(query),
            all_pages=bool(all_pages),
            raw=bool(raw),
            verbose=bool(verbose),
            **overrides,
        )
