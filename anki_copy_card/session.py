from __future__ import annotations

import logging
import queue
import threading
from typing import Callable

from .models import CardFields, DraftOverrides
from .normalize import derive_audio_guide
from .pipeline import synthesize_and_submit

logger = logging.getLogger(__name__)


class SessionState:
    """Editable draft plus everything that survives a reset.

    Only the thread that owns the window may call these methods. Worker
    threads started by :meth:`fire` talk back exclusively through
    ``completed``.
    """

    def __init__(self, client, on_complete: Callable[[], None] | None = None) -> None:
        self.client = client
        self.on_complete = on_complete
        self.completed: queue.Queue[CardFields] = queue.Queue()
        self.fired = 0
        self.previous_card: CardFields | None = None
        self.retain_previous = False
        self.reset()

    def reset(self) -> SessionState:
        self.front = ""
        self.audio_guide = ""
        self.back = ""
        self.follow_front = True
        return self

    def follow_front_update(self) -> SessionState:
        self.audio_guide = derive_audio_guide(self.front)
        return self

    def set_front(self, text: str) -> None:
        changed = text != self.front
        self.front = text
        if changed and self.follow_front:
            self.follow_front_update()

    def set_follow_front(self, value: bool) -> None:
        self.follow_front = value
        if value:
            self.follow_front_update()

    def clear_previous(self) -> None:
        self.previous_card = None

    def draft(self) -> DraftOverrides:
        return DraftOverrides(front=self.front, audio_guide=self.audio_guide, back=self.back)

    def fire(self) -> threading.Thread:
        draft = self.draft()
        previous = self.previous_card
        worker = threading.Thread(
            target=self._submit,
            args=(draft, previous),
            name=f"fire-{self.fired + 1}",
            daemon=True,
        )
        self.fired += 1
        worker.start()
        return worker

    def _submit(self, draft: DraftOverrides, previous: CardFields | None) -> None:
        card = synthesize_and_submit(self.client, draft, previous)
        if card is None:
            return
        self.completed.put(card)
        if self.on_complete is not None:
            self.on_complete()

    def poll_completion(self) -> CardFields | None:
        try:
            card = self.completed.get_nowait()
        except queue.Empty:
            return None
        self.reset()
        self.previous_card = card if self.retain_previous else None
        logger.debug("Applied completion for %s", card.front)
        return card

    def status_text(self) -> str:
        return f"Fired: {self.fired}"

    def previous_text(self) -> str:
        if self.previous_card is None:
            return ""
        return f"Firing will be based on previous card fired: {self.previous_card.front}"
