# src/services/toast_queue.py

"""Timer-driven notification queue with auto-dismiss."""

import logging
import secrets
import string
import time
from collections.abc import Callable
from dataclasses import dataclass

from src.config.settings import Settings

logger = logging.getLogger("price_track.toast")

_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_LENGTH = 9

VARIANTS: frozenset[str] = frozenset({"default", "destructive"})


@dataclass(frozen=True)
class Toast:
    """A transient notification."""

    id: str
    title: str
    description: str
    variant: str
    expires_at: float


ToastListener = Callable[[Toast], None]


class ToastQueue:
    """Queue of live toasts, each dismissed once its timeout elapses.

    Expiry is evaluated lazily against *clock* whenever the queue is
    read, so the queue itself owns no timers; the UI schedules its own
    refresh.
    """

    def __init__(
        self,
        timeout: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._timeout: float = (
            Settings.TOAST_TIMEOUT if timeout is None else timeout
        )
        self._clock = clock
        self._toasts: list[Toast] = []
        self._listeners: list[ToastListener] = []

    @property
    def timeout(self) -> float:
        """Seconds a toast stays visible."""
        return self._timeout

    def push(
        self,
        title: str,
        description: str = "",
        variant: str = "default",
    ) -> Toast:
        """Queue a new toast and notify subscribers."""
        if variant not in VARIANTS:
            raise ValueError(f"Unknown toast variant: {variant!r}")
        toast = Toast(
            id=self._new_id(),
            title=title,
            description=description,
            variant=variant,
            expires_at=self._clock() + self._timeout,
        )
        self._toasts.append(toast)
        logger.debug("Toast %s queued: %s", toast.id, title)
        for listener in list(self._listeners):
            listener(toast)
        return toast

    def dismiss(self, toast_id: str) -> bool:
        """Remove a toast by id. Returns whether it was present."""
        before = len(self._toasts)
        self._toasts = [t for t in self._toasts if t.id != toast_id]
        return len(self._toasts) != before

    def expire(self) -> int:
        """Drop toasts whose timeout has elapsed; return how many."""
        now = self._clock()
        before = len(self._toasts)
        self._toasts = [t for t in self._toasts if t.expires_at > now]
        expired = before - len(self._toasts)
        if expired:
            logger.debug("Expired %d toasts", expired)
        return expired

    def active(self) -> list[Toast]:
        """Live toasts, oldest first."""
        self.expire()
        return list(self._toasts)

    def subscribe(self, listener: ToastListener) -> None:
        """Call *listener* with every newly pushed toast."""
        self._listeners.append(listener)

    def _new_id(self) -> str:
        existing = {t.id for t in self._toasts}
        while True:
            candidate = "".join(
                secrets.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH)
            )
            if candidate not in existing:
                return candidate
