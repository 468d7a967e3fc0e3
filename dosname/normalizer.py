from __future__ import annotations

import unicodedata


def strip_diacritics(text: str) -> str:
    """Drop non-spacing marks so that accented letters fall back to their base letter.

    Scripts without a Latin decomposition (Greek, CJK, ...) come back unchanged
    apart from their own marks; the classifier decides what to do with them.
    """
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    return unicodedata.normalize("NFC", stripped)
