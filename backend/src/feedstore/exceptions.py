"""Error taxonomy shared by the codec, storage and API layers.

Every error carries ``status_code``: client-caused failures map to 400,
storage failures to 500.
"""


class FeedStoreError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(FeedStoreError):
    pass


class AlreadyExists(FeedStoreError):
    pass


class ParseError(FeedStoreError):
    pass


class InvalidEncoding(FeedStoreError):
    pass


class InvalidName(FeedStoreError):
    pass


class InvalidItemKey(FeedStoreError):
    pass


class InternalError(FeedStoreError):
    status_code = 500
