"""Stateful flag evaluator for a single identified user.

Holds the current configuration, the current subject and the evaluated
snapshot, and notifies subscribers when the snapshot changes.
"""

import logging
import threading
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Union

from .engine import evaluate
from .exceptions import ListenerError
from .models import Configuration, Scalar, Subject
from .wire import decode_config

__all__ = ["FlareFlags", "Listener"]

logger = logging.getLogger(__name__)

Listener = Callable[[], None]

_KEEP = object()


class FlareFlags:
    """Evaluates boolean feature flags for the current user.

    ``defaults`` fixes the set of known flag names and the value each one
    takes before a configuration is set, when the configuration does not
    mention it, and after :meth:`reset`.

    Thread-safe: mutations are serialized with a lock. Listeners run after
    the new snapshot is committed and the lock is released, so a listener may
    call back into any method, including the mutating ones.

    Example:
        >>> flags = FlareFlags({"newUi": False})
        >>> flags.set_config({"cohorts": {}, "flags": {"newUi": [False, "u1"]}})
        >>> flags.identify("u1")
        >>> flags.is_enabled("newUi")
        True
    """

    def __init__(self, defaults: Mapping[str, bool]):
        self._defaults = MappingProxyType(dict(defaults))
        self._config: Optional[Configuration] = None
        self._subject: Optional[Subject] = None
        self._flags: Dict[str, bool] = dict(self._defaults)
        # token -> listener; one token per subscribe() call
        self._listeners: Dict[object, Listener] = {}
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def defaults(self) -> Mapping[str, bool]:
        return self._defaults

    @property
    def config(self) -> Optional[Configuration]:
        """The current configuration, or None if none was ever set."""
        return self._config

    @property
    def subject(self) -> Optional[Subject]:
        """The identified user, or None while anonymous."""
        return self._subject

    def snapshot(self) -> Dict[str, bool]:
        """Return a copy of the evaluated flag values."""
        return dict(self._flags)

    def is_enabled(self, flag_name: str) -> bool:
        """Return the evaluated value of a flag, False for unknown names."""
        return self._flags.get(flag_name, False)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def set_config(self, config: Union[Configuration, Mapping]) -> None:
        """Replace the configuration and re-evaluate every flag.

        Accepts a :class:`Configuration` or its wire-format mapping.

        Raises:
            InvalidConfigError: If a wire mapping is malformed. State is
                left untouched in that case.
            ListenerError: If a listener raised while being notified.
        """
        if not isinstance(config, Configuration):
            config = decode_config(config)
        self._apply(config=config)

    def identify(
        self, user_id: str, properties: Optional[Mapping[str, Scalar]] = None
    ) -> None:
        """Replace the current user and re-evaluate every flag.

        The previous user's properties are discarded, not merged.
        """
        self._apply(subject=Subject(user_id, dict(properties or {})))

    def reset(self) -> None:
        """Forget the current user and restore every flag to its default.

        The configuration is kept; a later :meth:`identify` evaluates
        against it again.
        """
        self._apply(subject=None, flags=dict(self._defaults))

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` to be called after every snapshot change.

        Returns a callable that removes this registration. Calling it more
        than once is a no-op.
        """
        token = object()
        with self._lock:
            self._listeners[token] = listener

        def unsubscribe() -> None:
            with self._lock:
                self._listeners.pop(token, None)

        return unsubscribe

    # ------------------------------------------------------------------
    # Internal re-evaluation pipeline
    # ------------------------------------------------------------------

    def _apply(self, config=_KEEP, subject=_KEEP, flags=None) -> None:
        """Commit new state, diff the snapshot and notify on change.

        ``flags`` overrides evaluation with an explicit snapshot (used by
        reset). Every mutation goes through here.
        """
        with self._lock:
            if config is not _KEEP:
                self._config = config
            if subject is not _KEEP:
                self._subject = subject
            if flags is None:
                flags = evaluate(self._defaults, self._config, self._subject)

            changed = [name for name, value in flags.items() if self._flags.get(name) != value]
            self._flags = flags
            listeners = list(self._listeners.values()) if changed else []

        if not changed:
            logger.debug("Flags re-evaluated, no change")
            return
        logger.debug("Flags changed: %s", ", ".join(changed))
        self._notify(listeners)

    def _notify(self, listeners: List[Listener]) -> None:
        errors = []
        for listener in listeners:
            try:
                listener()
            except Exception as e:
                logger.exception("Flag listener %r failed", listener)
                errors.append(e)
        if errors:
            raise ListenerError(errors)
