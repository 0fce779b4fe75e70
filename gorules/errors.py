"""
Error types for the Go rules engine.

Every failure the engine reports is a GoError. The interface prints the
message and keeps going; game state is never changed by a failed operation.
"""


class GoError(ValueError):
    """Base class for all rules engine errors."""


class InvalidPosition(GoError):
    """A coordinate lies outside the board."""

    def __init__(self, x: int, y: int, size: int):
        self.x = x
        self.y = y
        self.size = size
        super().__init__(
            f"Position (x: {x}, y: {y}) is invalid for {size}x{size} board"
        )


class InvalidMove(GoError):
    """A command could not be parsed or refers to an unusable target."""

    def __init__(self, detail: str = ""):
        self.detail = detail
        message = "Couldn't parse move"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class NothingLeftToUndo(GoError):
    """Undo was requested with only the initial position in history."""

    def __init__(self):
        super().__init__("Nothing left to undo")


class KoViolation(GoError):
    """The resulting board repeats a position already in history."""

    def __init__(self):
        super().__init__("Violation of Ko")
