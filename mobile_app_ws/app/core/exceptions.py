"""Exceptions raised by the storage layer."""


class UserServiceException(Exception):
    """A storage operation failed in a way the client cannot fix.

    Translated into a 500 response carrying ``message`` by the
    application's exception handlers.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
