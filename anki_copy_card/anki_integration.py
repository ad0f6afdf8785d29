from __future__ import annotations

import logging

import requests

from .models import SOURCE_FIELDS, CardFields, CurrentCard

logger = logging.getLogger(__name__)


class AnkiConnectError(RuntimeError):
    """Any failed exchange with AnkiConnect."""


class TransportError(AnkiConnectError):
    pass


class SchemaError(AnkiConnectError):
    pass


class RemoteRejection(AnkiConnectError):
    pass


class AnkiConnectClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 10,
        deck_name: str = "Immersion",
        model_name: str = "Immersion",
        tags: list[str] | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.deck_name = deck_name
        self.model_name = model_name
        self.tags = list(tags) if tags is not None else ["Immersion", "from::KanKenDeck"]

    @classmethod
    def from_settings(cls, settings) -> AnkiConnectClient:
        return cls(
            settings.ankiconnect_url,
            timeout=settings.request_timeout,
            deck_name=settings.deck_name,
            model_name=settings.model_name,
            tags=settings.tags,
        )

    def _invoke(self, action: str, **params):
        payload = {"action": action, "version": 6}
        if params:
            payload["params"] = params
        logger.debug("AnkiConnect %s", action)
        try:
            resp = requests.post(self.base_url, json=payload, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as e:
            raise TransportError(f"{action}: {e}") from e
        except ValueError as e:
            raise TransportError(f"{action}: response is not JSON") from e
        if not isinstance(data, dict):
            raise TransportError(f"{action}: unexpected response {data!r}")
        if data.get("error"):
            raise RemoteRejection(f"{action}: {data['error']}")
        return data.get("result")

    def current_card(self) -> CurrentCard:
        result = self._invoke("guiCurrentCard")
        if not result:
            raise SchemaError("guiCurrentCard: no card is being reviewed")
        fields = result.get("fields") if isinstance(result, dict) else None
        if not isinstance(fields, dict):
            raise SchemaError("guiCurrentCard: result has no fields")

        values = {}
        for name in SOURCE_FIELDS:
            f = fields.get(name)
            if not isinstance(f, dict) or not isinstance(f.get("value"), str):
                raise SchemaError(f"guiCurrentCard: field {name!r} is missing")
            values[name] = f["value"]

        return CurrentCard(
            deck_name=str(result.get("deckName", "")),
            kanji=values["Kanji"],
            kana=values["Kana"],
            sentence_front=values["SentenceFront"],
            sentence_back=values["SentenceBack"],
            picture=values["Picture"],
            kanken_audio=values["KankenAudio"],
            kanken_level=values["KankenLevel"],
            meaning=values["Meaning"],
            diagram=values["Diagram"],
        )

    def add_card(self, card: CardFields):
        note = {
            "deckName": self.deck_name,
            "modelName": self.model_name,
            "fields": card.to_note_fields(),
            "tags": list(self.tags),
        }
        return self._invoke("guiAddCards", note=note)
