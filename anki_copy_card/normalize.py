from __future__ import annotations

import html
import re

from bs4 import BeautifulSoup


LINE_BREAK = "<br />"

_GUIDE_STRIP = str.maketrans("", "", "(){} ")
_FURIGANA = re.compile(r"\[[^\]]*\]")


def derive_audio_guide(text: str) -> str:
    """Turn furigana-annotated text into the key used to look up audio.

    ``噛[か]み 殺[ころ]す`` becomes ``噛み殺す``. Parentheses, braces and
    spaces are dropped first, then every ``[...]`` reading.
    """
    return _FURIGANA.sub("", text.translate(_GUIDE_STRIP))


def sanitize_html(text: str) -> str:
    soup = BeautifulSoup(text, "html.parser")
    for s in soup(["script", "style", "noscript"]):
        s.extract()
    return html.escape(soup.get_text(), quote=False)


def to_line_breaks(text: str) -> str:
    return text.replace("\n", LINE_BREAK)
