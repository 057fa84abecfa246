class ShopifyError(Exception):
    """Base class for errors raised by this library."""


class DecodeError(ShopifyError, ValueError):
    """A JSON value did not have any of the shapes we know how to decode."""


class MalformedPaginationError(ShopifyError, ValueError):
    """A ``Link`` header could not be turned into page cursors."""


class TimestampParseError(ShopifyError, ValueError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"unrecognised timestamp: {value!r}")


class WebhookVerificationError(ShopifyError):
    """Raised by the verbose webhook check with the reason it failed."""
