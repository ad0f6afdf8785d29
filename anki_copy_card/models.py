from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class CardFields:
    front: str
    back: str
    annotation_paragraph: str
    audio_guide: str
    audio: str

    def to_note_fields(self) -> dict[str, str]:
        """Map onto the field names of the Immersion note type."""
        return {
            "Front": self.front,
            "Back": self.back,
            "Back Paragraph": self.annotation_paragraph,
            "AudioGuide": self.audio_guide,
            "Audio": self.audio,
        }

    def with_overrides(self, **changes: str) -> CardFields:
        return replace(self, **changes)


@dataclass(frozen=True)
class DraftOverrides:
    front: str = ""
    audio_guide: str = ""
    back: str = ""


# Field names of the KanKen note type shown in the reviewer.
SOURCE_FIELDS = (
    "Kanji",
    "Kana",
    "SentenceFront",
    "SentenceBack",
    "Picture",
    "KankenAudio",
    "KankenLevel",
    "Meaning",
    "Diagram",
)


@dataclass(frozen=True)
class CurrentCard:
    deck_name: str
    kanji: str
    kana: str
    sentence_front: str
    sentence_back: str
    picture: str
    kanken_audio: str
    kanken_level: str
    meaning: str
    diagram: str
