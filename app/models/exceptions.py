"""
Exception hierarchy for the CircuiTikZ tool core.

All errors raised by the model and codec layers derive from
CircuitikzToolError so callers can catch them in one place.
"""


class CircuitikzToolError(Exception):
    """Base exception for the CircuiTikZ tool."""


class InvalidKind(CircuitikzToolError, ValueError):
    """
    Raised when a kind cannot be used where it was supplied.

    Covers unknown numeric codes, editing pseudo-kinds (delete/cancel),
    and a point kind passed to the segment constructor or vice versa.

    Attributes:
        kind: The offending kind or raw code
    """

    def __init__(self, kind, message=None):
        self.kind = kind
        if message is None:
            message = f"Invalid component kind: {kind!r}"
        super().__init__(message)


class InvalidState(CircuitikzToolError, RuntimeError):
    """
    Raised when a geometry accessor does not match the instance class.

    Asking a point instance for its start/end, or a segment instance for
    its position, is a programming error rather than a data error.
    """

    def __init__(self, accessor: str, kind):
        self.accessor = accessor
        self.kind = kind
        super().__init__(f"'{accessor}' is not defined for {kind!r}")


class MarkupError(CircuitikzToolError, ValueError):
    """
    Raised when a markup record cannot be turned back into an instance.

    Attributes:
        record: The raw record text
    """

    def __init__(self, message: str, record: str = ""):
        self.record = record
        super().__init__(message)
