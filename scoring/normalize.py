"""Token normalization shared by every package-scoring dimension.

"Small-Group", "small group" and "small_group" all compare equal after
normalize_token, so equality and adjacency checks stay consistent.
"""
from __future__ import annotations

import re
from typing import Iterable, List, Optional

# Letters and digits of any script survive; everything else is a separator.
_SEPARATOR_RUN = re.compile(r"[\W_]+")


def normalize_token(token: Optional[str]) -> str:
    """Lowercase and collapse separator runs into a single underscore."""
    if not token:
        return ""
    return _SEPARATOR_RUN.sub("_", str(token).casefold()).strip("_")


def normalize_tokens(tokens: Optional[Iterable[str]]) -> List[str]:
    """Normalize a list of tokens, dropping empties and keeping first-seen order."""
    if isinstance(tokens, str):
        tokens = [tokens]
    seen = set()
    out: List[str] = []
    for token in tokens or []:
        norm = normalize_token(token)
        if norm and norm not in seen:
            seen.add(norm)
            out.append(norm)
    return out
