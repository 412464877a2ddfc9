"""Per-flag view for reactive consumers.

A view layer needs two things from the evaluator: a way to learn that
something changed and a way to read the latest value. :class:`FlagView`
narrows both to a single flag.
"""

from typing import Callable

from .client import FlareFlags, Listener

__all__ = ["FlagView"]


class FlagView:
    """Read and watch one flag of a :class:`FlareFlags` instance."""

    def __init__(self, flags: FlareFlags, flag_name: str):
        self._flags = flags
        self.flag_name = flag_name

    @property
    def value(self) -> bool:
        return self._flags.is_enabled(self.flag_name)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self._flags.subscribe(listener)

    def watch(self, callback: Callable[[bool], None]) -> Callable[[], None]:
        """Call ``callback(new_value)`` whenever this flag's value changes.

        Changes to other flags are filtered out. Returns the unsubscribe
        callable.
        """
        last = [self.value]

        def on_change() -> None:
            current = self.value
            if current != last[0]:
                last[0] = current
                callback(current)

        return self._flags.subscribe(on_change)

    def __bool__(self) -> bool:
        return self.value

    def __repr__(self) -> str:
        return f"FlagView({self.flag_name!r}, value={self.value})"
