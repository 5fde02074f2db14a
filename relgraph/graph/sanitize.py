"""Turn arbitrary names into identifiers safe for graph keys and labels."""

from __future__ import annotations

import re
import unicodedata
from typing import Optional

# Characters that break DOT quoting, record/HTML labels or node:port syntax.
_UNSAFE = re.compile(r'["\\<>{}|:]')
_WHITESPACE = re.compile(r"\s+")


def sanitize(raw: Optional[str]) -> str:
    """Return a stable, DOT-safe version of *raw*.

    Letters of any script survive unchanged; control characters and the
    characters ``" \\ < > { } | :`` are removed and whitespace runs collapse to
    one space.  ``None`` becomes the empty string.
    """
    if raw is None:
        return ""
    text = unicodedata.normalize("NFC", str(raw))
    text = "".join(ch for ch in text if unicodedata.category(ch)[0] != "C" or ch in "\t\n\r")
    text = _UNSAFE.sub("", text)
    return _WHITESPACE.sub(" ", text).strip()
