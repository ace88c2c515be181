from typing import Any


class TranslationError(Exception):
    pass


class ColumnCountError(TranslationError):
    def __init__(self, kind: str, expected: int, actual: int) -> None:
        self.kind = kind
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected} columns for {kind}, have {actual}")


class ColumnValueError(TranslationError):
    def __init__(self, kind: str, errors: list[dict[str, Any]]) -> None:
        self.kind = kind
        self.errors = errors
        super().__init__(f"invalid column values for {kind}: {errors}")


class UnknownSMSTypeError(TranslationError):
    """Raised for a message type code with no known mapping.

    Please report these, along with whatever is known about the message
    (sent, received, drafted, ...), so the mapping can be extended.
    """

    def __init__(self, raw: int) -> None:
        self.raw = raw
        super().__init__(f"undefined SMS type: {raw:#x}")


class DateOutOfRangeError(TranslationError):
    def __init__(self, millis: int) -> None:
        self.millis = millis
        super().__init__(f"date out of range: {millis} ms")
