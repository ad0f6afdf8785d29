from __future__ import annotations

import pytest

from anki_copy_card.models import CurrentCard


class StubClient:
    def __init__(self, current=None, current_error=None, add_error=None):
        self.current = current
        self.current_error = current_error
        self.add_error = add_error
        self.current_calls = 0
        self.added = []

    def current_card(self):
        self.current_calls += 1
        if self.current_error is not None:
            raise self.current_error
        return self.current

    def add_card(self, card):
        if self.add_error is not None:
            raise self.add_error
        self.added.append(card)


@pytest.fixture
def current_card():
    return CurrentCard(
        deck_name="KanKen",
        kanji="噛み殺す",
        kana="かみころす",
        sentence_front="あくびを＿＿",
        sentence_back="<b>あくびを</b>噛み殺す<script>x()</script>",
        picture='<img src="yawn.jpg">',
        kanken_audio="[sound:kamikorosu.mp3]",
        kanken_level="準1級",
        meaning="to stifle a yawn",
        diagram="",
    )


@pytest.fixture
def stub_client(current_card):
    return StubClient(current=current_card)
