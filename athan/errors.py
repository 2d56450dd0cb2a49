class AthanError(Exception):
    pass


class ConfigError(AthanError):
    pass


class NetworkError(AthanError):
    pass


class DecodeError(AthanError):
    pass


class NotFoundError(AthanError):
    pass


class ParseError(AthanError):
    pass


class EmptyTimetableError(AthanError):
    pass


class RemoteError(AthanError):
    """Upstream answered, but not with success. Keeps the status and raw body."""

    def __init__(self, message, status=None, body=None):
        super().__init__(message)
        self.status = status
        self.body = body
