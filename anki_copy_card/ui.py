from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk

from .config import Settings
from .session import SessionState

logger = logging.getLogger(__name__)


class App(tk.Tk):
    def __init__(self, session: SessionState, settings: Settings) -> None:
        super().__init__()
        self.session = session
        self.poll_interval_ms = settings.poll_interval_ms
        self.title(settings.window_title)
        self.geometry("800x600")
        # Worker threads only ask for an early poll; state changes stay on this thread.
        session.on_complete = lambda: self.after(0, self._poll)
        self._syncing = False
        self._build_ui()
        self._push()
        self.after(self.poll_interval_ms, self._tick)

    def _build_ui(self) -> None:
        main = ttk.Frame(self, padding=10)
        main.pack(fill="both", expand=True)
        main.columnconfigure(1, weight=1)

        ttk.Label(main, text="Anki Copy Card", font=("TkDefaultFont", 16, "bold")).grid(
            row=0, column=0, columnspan=2, sticky="w", pady=(0, 8)
        )

        ttk.Label(main, text="Custom Front:").grid(row=1, column=0, sticky="nw", padx=(0, 4))
        self.var_front = tk.StringVar()
        ttk.Entry(main, textvariable=self.var_front).grid(row=1, column=1, sticky="ew", pady=2)
        self.var_front.trace_add("write", self._on_front_changed)

        ttk.Label(main, text="Custom Audio Guide:").grid(row=2, column=0, sticky="nw", padx=(0, 4))
        guide = ttk.Frame(main)
        guide.grid(row=2, column=1, sticky="ew", pady=2)
        guide.columnconfigure(0, weight=1)
        self.var_guide = tk.StringVar()
        ttk.Entry(guide, textvariable=self.var_guide).grid(row=0, column=0, sticky="ew")
        self.var_follow = tk.BooleanVar(value=True)
        ttk.Checkbutton(
            guide, text="Follow Front", variable=self.var_follow, command=self._on_follow_toggled
        ).grid(row=1, column=0, sticky="w")

        ttk.Label(main, text="Back:").grid(row=3, column=0, sticky="nw", padx=(0, 4))
        self.txt_back = tk.Text(main, height=6, wrap="word")
        self.txt_back.grid(row=3, column=1, sticky="ew", pady=2)

        self.var_retain = tk.BooleanVar(value=self.session.retain_previous)
        ttk.Checkbutton(
            main,
            text="Maintain current card for next round",
            variable=self.var_retain,
            command=self._on_retain_toggled,
        ).grid(row=4, column=0, columnspan=2, sticky="w", pady=(10, 2))

        buttons = ttk.Frame(main)
        buttons.grid(row=5, column=0, columnspan=2, sticky="w")
        ttk.Button(buttons, text="Fire", command=self._fire).pack(side="left", padx=(0, 4))
        ttk.Button(buttons, text="Reset", command=self._reset).pack(side="left")

        self.previous = ttk.Frame(main)
        self.previous.grid(row=6, column=0, columnspan=2, sticky="w", pady=(6, 0))
        self.lbl_previous = ttk.Label(self.previous, text="")
        self.lbl_previous.pack(anchor="w")
        ttk.Button(self.previous, text="Reset Previous Card", command=self._clear_previous).pack(
            anchor="w"
        )

        self.lbl_fired = ttk.Label(main, text="")
        self.lbl_fired.grid(row=7, column=0, columnspan=2, sticky="w", pady=(6, 0))

    def _pull(self) -> None:
        self.session.audio_guide = self.var_guide.get()
        self.session.back = self.txt_back.get("1.0", "end-1c")

    def _push(self) -> None:
        self._syncing = True
        try:
            self.var_front.set(self.session.front)
            self.var_guide.set(self.session.audio_guide)
            self.var_follow.set(self.session.follow_front)
            self.var_retain.set(self.session.retain_previous)
            self.txt_back.delete("1.0", "end")
            self.txt_back.insert("1.0", self.session.back)
        finally:
            self._syncing = False
        self._refresh_labels()

    def _refresh_labels(self) -> None:
        self.lbl_fired.config(text=self.session.status_text())
        if self.session.previous_card is None:
            self.previous.grid_remove()
        else:
            self.lbl_previous.config(text=self.session.previous_text())
            self.previous.grid()

    def _on_front_changed(self, *_args) -> None:
        if self._syncing:
            return
        self._pull()
        self.session.set_front(self.var_front.get())
        self.var_guide.set(self.session.audio_guide)

    def _on_follow_toggled(self) -> None:
        self._pull()
        self.session.set_follow_front(self.var_follow.get())
        self.var_guide.set(self.session.audio_guide)

    def _on_retain_toggled(self) -> None:
        self.session.retain_previous = self.var_retain.get()

    def _fire(self) -> None:
        self._pull()
        self.session.fire()
        self._refresh_labels()

    def _reset(self) -> None:
        self.session.reset()
        self._push()

    def _clear_previous(self) -> None:
        self.session.clear_previous()
        self._refresh_labels()

    def _poll(self) -> None:
        if self.session.poll_completion() is not None:
            self._push()

    def _tick(self) -> None:
        self._poll()
        self.after(self.poll_interval_ms, self._tick)


def run(session: SessionState, settings: Settings) -> None:
    app = App(session, settings)
    logger.info("Watching AnkiConnect at %s", settings.ankiconnect_url)
    app.mainloop()
