from __future__ import annotations

import logging

from .anki_integration import AnkiConnectError
from .models import CardFields, CurrentCard, DraftOverrides
from .normalize import sanitize_html, to_line_breaks

logger = logging.getLogger(__name__)


def clean_draft(draft: DraftOverrides) -> DraftOverrides:
    return DraftOverrides(
        front=draft.front.strip(),
        audio_guide=draft.audio_guide.strip(),
        back=to_line_breaks(draft.back.strip()),
    )


def merge_with_previous(previous: CardFields, draft: DraftOverrides) -> CardFields:
    """Override only the fields the draft actually sets."""
    changes = {}
    if draft.front:
        changes["front"] = draft.front
    if draft.back:
        changes["back"] = draft.back
    if draft.audio_guide:
        changes["audio_guide"] = draft.audio_guide
    return previous.with_overrides(**changes)


def build_fresh(current: CurrentCard, draft: DraftOverrides) -> CardFields:
    sentence = sanitize_html(current.sentence_back)
    paragraph = to_line_breaks(f"{sentence}\n{current.picture}".strip())
    return CardFields(
        front=draft.front or f"{current.kanji}[{current.kana}]",
        back=draft.back or current.meaning,
        annotation_paragraph=paragraph,
        # The headword is used as-is here; only edits to the front go
        # through derive_audio_guide.
        audio_guide=draft.audio_guide or current.kanji,
        audio=current.kanken_audio,
    )


def synthesize_and_submit(
    client, draft: DraftOverrides, previous: CardFields | None = None
) -> CardFields | None:
    """Build the new card and hand it to Anki.

    Returns the submitted card, or ``None`` when any AnkiConnect call
    failed. Failures are logged and otherwise dropped.
    """
    draft = clean_draft(draft)
    try:
        if previous is not None:
            card = merge_with_previous(previous, draft)
        else:
            card = build_fresh(client.current_card(), draft)
        client.add_card(card)
    except AnkiConnectError as e:
        logger.warning("Card not added: %s", e)
        return None

    logger.info("Added card %s", card.front)
    return card
