"""Exception types raised by flare_flags."""

from typing import List

__all__ = ["FlareFlagsError", "InvalidConfigError", "ListenerError"]


class FlareFlagsError(Exception):
    """Base class for flare_flags errors."""


class InvalidConfigError(FlareFlagsError, ValueError):
    """A configuration blob does not have the expected wire shape."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {super().__str__()}"
        return super().__str__()


class ListenerError(FlareFlagsError):
    """One or more listeners raised during a notification round.

    Raised after every listener of the round has been called. The new
    snapshot is already committed when this is raised.
    """

    def __init__(self, errors: List[BaseException]) -> None:
        super().__init__(
            f"{len(errors)} listener(s) failed: "
            + "; ".join(repr(e) for e in errors)
        )
        self.errors = errors
