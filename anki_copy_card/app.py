from __future__ import annotations

import argparse
import logging
import sys

from .anki_integration import AnkiConnectClient
from .config import load_settings
from .models import DraftOverrides
from .pipeline import synthesize_and_submit
from .session import SessionState


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(levelname)s %(name)s %(message)s",
    )


def gui(config_path: str) -> None:
    from .ui import run

    settings = load_settings(config_path)
    setup_logging(settings.log_level)
    session = SessionState(AnkiConnectClient.from_settings(settings))
    run(session, settings)


def fire_once(config_path: str, front: str, back: str, audio_guide: str) -> int:
    settings = load_settings(config_path)
    setup_logging(settings.log_level)
    client = AnkiConnectClient.from_settings(settings)
    draft = DraftOverrides(front=front, audio_guide=audio_guide, back=back)
    card = synthesize_and_submit(client, draft)
    if card is None:
        return 1
    print(card.front)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Anki Copy Card")
    parser.add_argument("--config", default="config.yaml")
    sub = parser.add_subparsers(dest="cmd")
    sub.add_parser("gui")
    once = sub.add_parser("fire-once")
    once.add_argument("--front", default="")
    once.add_argument("--back", default="")
    once.add_argument("--audio-guide", default="")
    args = parser.parse_args(argv)

    if args.cmd == "fire-once":
        return fire_once(args.config, args.front, args.back, args.audio_guide)
    gui(args.config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
