class FetchError(Exception):
    '''Raised when a single search page could not be fetched.'''


class TransportError(FetchError):
    pass


class StatusError(FetchError):

    def __init__(self, status_code: int, reason: str, body: str):
        super().__init__(f'got non-200 code: {status_code}, {reason}')
        self.status_code = status_code
        self.reason = reason
        self.body = body


class DecodeError(FetchError):
    pass
