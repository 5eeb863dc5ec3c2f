"""
Service layer for string operations.

``StringService`` provides the two operations exposed by the API:
converting a string to upper case and measuring its length.  The
service holds no state, so a single instance may be shared freely
between concurrent requests.
"""


class EmptyStringError(ValueError):
    """Raised when an operation that requires input receives ``""``."""

    def __init__(self, message: str = "empty string") -> None:
        super().__init__(message)


def _upper_char(c: str) -> str:
    # Simple case mapping: a character whose upper-case form spans
    # several characters (``ß`` → ``SS``) is left as is.
    upper = c.upper()
    return upper if len(upper) == 1 else c


class StringService:
    """Operations on strings."""

    def uppercase(self, s: str) -> str:
        """Return ``s`` with every cased character converted to upper case.

        Each character maps to exactly one character, so the result is
        as long as the input.  Raises ``EmptyStringError`` when ``s`` is
        empty; this is the only validation rule of the service.
        """
        if s == "":
            raise EmptyStringError()
        return "".join(_upper_char(c) for c in s)

    def count(self, s: str) -> int:
        """Return the length of ``s`` in UTF-8 bytes.  Never fails."""
        return len(s.encode("utf-8", "surrogatepass"))
