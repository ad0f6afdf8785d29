from anki_copy_card.normalize import derive_audio_guide, sanitize_html, to_line_breaks


def test_derive_audio_guide_strips_readings_and_punctuation():
    assert derive_audio_guide("ab[]c[de]f gh[ij]k (lmn) {op}") == "abcfghklmnop"


def test_derive_audio_guide_furigana():
    assert derive_audio_guide("噛[か]み 殺[ころ]す") == "噛み殺す"


def test_derive_audio_guide_strips_characters_before_readings():
    # The space is removed first, so "[a b]" is still one reading.
    assert derive_audio_guide("x[a b]y") == "xy"
    assert derive_audio_guide("x[(]y") == "xy"


def test_derive_audio_guide_unbalanced_brackets():
    assert derive_audio_guide("a[b[c]d]e") == "ad]e"
    assert derive_audio_guide("a[bc") == "a[bc"
    assert derive_audio_guide("") == ""


def test_sanitize_html_drops_tags_and_scripts():
    text = '<div class="s"><b>あくびを</b>噛み殺す<script>alert(1)</script></div>'
    assert sanitize_html(text) == "あくびを噛み殺す"


def test_sanitize_html_keeps_markup_out_of_entities():
    assert sanitize_html("&lt;b&gt;x&lt;/b&gt;") == "&lt;b&gt;x&lt;/b&gt;"
    assert sanitize_html("") == ""


def test_to_line_breaks():
    assert to_line_breaks("a\nb\n") == "a<br />b<br />"
