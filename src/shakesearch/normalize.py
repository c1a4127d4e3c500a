from __future__ import annotations

# str.lower() maps capital sigma by context (final form at word end)
_CONTEXTUAL = "Σ"


def _fold_char(ch: str) -> str:
    """Lowercase one character, keeping it as-is if lowering would change its length."""
    low = ch.lower()
    return low if len(low) == 1 else ch


def fold_case(text: str) -> str:
    """
    Case-fold text for matching without moving any character.

    Rules:
      * every character is lowered on its own (no locale, no context)
      * a character whose lowercase form is longer than one character
        (e.g. 'İ' -> 'i̇') is kept unchanged
      * len(fold_case(s)) == len(s), so offsets into the folded text are
        offsets into the original text
    """
    if _CONTEXTUAL not in text:
        folded = text.lower()
        # lower() never drops a character, so equal length means nothing expanded
        if len(folded) == len(text):
            return folded
    return "".join(_fold_char(ch) for ch in text)
