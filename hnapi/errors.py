from typing import Optional


class HackerNewsError(Exception):
    """Base class for every error raised by the client."""


class TransportError(HackerNewsError):
    def __init__(self, url: str, cause: Exception):
        self.url = url
        self.cause = cause
        super().__init__(f"GET {url} failed: {cause}")


class NotFound(HackerNewsError):
    def __init__(self, url: str):
        self.url = url
        super().__init__(f"GET {url}: not found")


class DecodeError(HackerNewsError):
    """Undecodable response. Reason and body are both cut to PREVIEW_CHARS."""

    PREVIEW_CHARS = 80

    def __init__(self, url: str, reason: str, body: Optional[bytes] = None):
        self.url = url
        self.reason = self._truncate(reason)
        self.preview = self._truncate(body.decode("utf-8", errors="replace") if body else "")
        super().__init__(f"GET {url}: cannot decode response ({self.reason}); body={self.preview!r}")

    @classmethod
    def _truncate(cls, text: str) -> str:
        if len(text) > cls.PREVIEW_CHARS:
            return text[: cls.PREVIEW_CHARS] + "..."
        return text


class TypeMismatch(HackerNewsError):
    def __init__(self, item_id: int, operation: str, expected: str, actual: str):
        self.item_id = item_id
        self.operation = operation
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Called {operation} on ID #{item_id} which is not a {expected}. "
            f"Item is of type {actual!r}."
        )
