"""Copy the card on screen in Anki into an annotated Immersion card."""

__version__ = "0.1.0"
