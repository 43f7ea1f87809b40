"""elsfinder error types."""


class ElsError(Exception):
    """Base error for all elsfinder failures."""


class ElsDataError(ElsError):
    """Bundled or supplied data is missing or malformed."""


class ElsVersionError(ElsDataError):
    """Manifest version mismatch."""


class ElsChecksumError(ElsDataError):
    """File checksum verification failed."""


class DuplicateSymbolError(ElsError):
    """The same letter was given twice when building a graph."""


class UnknownSymbolError(ElsError):
    """A character outside the graph's alphabet was weighed or traversed."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"symbol {symbol!r} is not in the letter graph")
        self.symbol = symbol


class InvalidSkipError(ElsError):
    """Skip distance of zero."""


class EmptyKeywordError(ElsError):
    """Keyword has no letters left after normalization."""


class IndexMappingError(ElsError):
    """A normalized index does not resolve to an original-text position."""
