"""Single-slot transient notices (toasts)."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Literal

from notes_app.scheduler import Scheduler

logger = logging.getLogger(__name__)

NoticeKind = Literal["success", "error", "info"]

DEFAULT_DURATION = 3.0
EXIT_DURATION = 0.3  # length of the slide-out animation


@dataclass(frozen=True)
class Notice:
    """A short-lived message shown to the user."""

    message: str
    kind: NoticeKind
    seq: int
    leaving: bool = False


class Notifier:
    """Shows at most one notice at a time; each one dismisses itself."""

    def __init__(
        self,
        scheduler: Scheduler,
        duration: float = DEFAULT_DURATION,
        exit_duration: float = EXIT_DURATION,
    ) -> None:
        self._scheduler = scheduler
        self._duration = duration
        self._exit_duration = exit_duration
        self._seq = 0
        self.current: Notice | None = None

    def show(self, message: str, kind: NoticeKind = "info") -> Notice:
        """Replace the visible notice and schedule its dismissal."""
        self._seq += 1
        self.current = Notice(message=message, kind=kind, seq=self._seq)
        self._scheduler.call_later(self._duration, self._begin_exit, self._seq)
        logger.debug("Notice #%d (%s): %s", self._seq, kind, message)
        return self.current

    def _begin_exit(self, seq: int) -> None:
        # A replaced notice is already gone
        if self.current is None or self.current.seq != seq:
            return
        self.current = dataclasses.replace(self.current, leaving=True)
        self._scheduler.call_later(self._exit_duration, self._remove, seq)

    def _remove(self, seq: int) -> None:
        if self.current is not None and self.current.seq == seq:
            self.current = None
