import re
from typing import List, Set

from postpages.schemas.post import Heading

_HEADING_RE = re.compile(r"^(#{1,6})\s+(.*?)(?:\s+#+)?\s*$")
_FENCE_RE = re.compile(r"^\s*(`{3,}|~{3,})")
_SLUG_STRIP_RE = re.compile(r"[^\w\s-]")

_EMOJI_RANGES = (
    (0x1F1E6, 0x1F1FF),  # flags
    (0x1F300, 0x1F5FF),  # symbols & pictographs
    (0x1F600, 0x1F64F),  # emoticons
    (0x1F680, 0x1F6FF),  # transport & map
    (0x1F900, 0x1F9FF),  # supplemental symbols
    (0x1FA70, 0x1FAFF),  # pictographs ext
    (0x2600, 0x26FF),  # misc symbols
    (0x2700, 0x27BF),  # dingbats
    (0xFE00, 0xFE0F),  # variation selectors
)


def _is_emoji_char(ch: str) -> bool:
    cp = ord(ch)
    if cp == 0x200D:  # zero width joiner
        return True
    return any(start <= cp <= end for start, end in _EMOJI_RANGES)


def normalize_heading(text: str) -> str:
    """Strip emoji-like glyphs and collapse whitespace."""

    cleaned = "".join(ch for ch in text if not _is_emoji_char(ch))
    collapsed = " ".join(cleaned.split())
    return collapsed.strip()


def slugify_heading(text: str) -> str:
    slug = _SLUG_STRIP_RE.sub("", text.lower())
    slug = re.sub(r"[\s_]+", "-", slug).strip("-")
    return re.sub(r"-{2,}", "-", slug) or "section"


def extract_headings(markdown: str, max_depth: int = 3) -> List[Heading]:
    """Return ATX headings outside fenced code, each with a unique anchor."""

    headings: List[Heading] = []
    used: Set[str] = set()
    fence = None  # opening marker of the fenced block we are in

    for line in markdown.splitlines():
        fence_match = _FENCE_RE.match(line)
        if fence_match:
            marker = fence_match.group(1)
            if fence is None:
                fence = marker
                continue
            # only a run of the same character, at least as long, closes it
            if marker[0] == fence[0] and len(marker) >= len(fence):
                fence = None
            continue
        if fence is not None:
            continue

        match = _HEADING_RE.match(line)
        if not match:
            continue
        depth = len(match.group(1))
        if depth > max_depth:
            continue
        raw_text = match.group(2).strip()
        text = normalize_heading(raw_text) or raw_text
        if not text:
            continue

        base = slugify_heading(text)
        candidate, n = base, 0
        while candidate in used:
            n += 1
            candidate = f"{base}-{n}"
        used.add(candidate)
        headings.append(Heading(depth=depth, text=text, slug=candidate))

    return headings
