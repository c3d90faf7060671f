class GofindError(Exception):
    """Base class for errors reported by gofind."""


class TransportError(GofindError):
    """The request never produced an HTTP response (DNS, refused, timeout...)."""

    def __init__(self, cause):
        super().__init__(str(cause))
        self.cause = cause


class RemoteStatusError(GofindError):
    def __init__(self, status_code, reason):
        super().__init__(f"{status_code} {reason}")
        self.status_code = status_code
        self.reason = reason


class ParseError(GofindError):
    pass


class SearchAborted(GofindError):
    """A page failed; carries the records gathered before the failure."""

    def __init__(self, records, error):
        super().__init__(str(error))
        self.records = records
        self.error = error
