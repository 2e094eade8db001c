"""
Line-break protection for Thai text that ends up in a PDF.

Layout engines happily break a line between Thai script and a number, so an
address such as "จังหวัดขอนแก่น 40000" comes out as "...ขอนแก่น" / "40000" or,
worse, with the postal code split. :func:`guard` inserts invisible WORD JOINER
characters at those boundaries; it never adds, removes or reorders a visible
character and can safely be applied to text that was already guarded.
"""
from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

WJ = "\u2060"      # Word Joiner: ห้ามตัดบรรทัด (มองไม่เห็น)
NBSP = "\u00a0"    # No-Break Space
ZWJ = "\u200d"
ZWNJ = "\u200c"
ZWSP = "\u200b"
NNBSP = "\u202f"

THAI_RANGE = "\u0e00-\u0e7f"

_THAI_RE = re.compile(f"[{THAI_RANGE}]")
_DIGIT_RE = re.compile(r"[0-9]")

# รหัสไปรษณีย์: เลข 5 หลักพอดีที่ท้ายข้อความ (มีช่องว่างต่อท้ายได้)
# ตัวเลขที่คั่นด้วย WJ อยู่แล้วนับเป็นเลขชุดเดียวกัน
_POSTAL_RE = re.compile(rf"(?:(?<![0-9]){WJ}|(?<![0-9{WJ}]))([0-9]{{5}}){WJ}?(?=\s*\Z)")

# อักษรไทย + ช่องว่าง + ตัวเลข
_THAI_SPACE_DIGIT_RE = re.compile(rf"([{THAI_RANGE}])(\s+){WJ}?(?=[0-9])")

# ช่องว่างแนวนอน (ไม่รวมขึ้นบรรทัดใหม่) ระหว่างอักษรไทยสองตัว
_THAI_GAP_RE = re.compile(rf"(?<=[{THAI_RANGE}])[^\S\r\n]+(?=[{THAI_RANGE}])")
_HSPACE_RE = re.compile(r"[^\S\r\n]")

_INVISIBLE_LABELS = {
    WJ: "[WJ]",
    NBSP: "[NBSP]",
    ZWJ: "[ZWJ]",
    ZWNJ: "[ZWNJ]",
    ZWSP: "[ZWSP]",
    NNBSP: "[NNBSP]",
}


def contains_thai(text: str | None) -> bool:
    return bool(text) and _THAI_RE.search(text) is not None


def contains_digits(text: str | None) -> bool:
    return bool(text) and _DIGIT_RE.search(text) is not None


def protect_postal_code(text: str) -> str:
    """Wrap a trailing 5-digit run in word joiners."""
    return _POSTAL_RE.sub(lambda m: f"{WJ}{m.group(1)}{WJ}", text)


def protect_thai_number_boundary(text: str) -> str:
    """Glue a number to the Thai word before it; the whitespace between them stays."""
    return _THAI_SPACE_DIGIT_RE.sub(lambda m: f"{m.group(1)}{m.group(2)}{WJ}", text)


def guard(text: str | None) -> str | None:
    if not text:
        return text
    if not contains_digits(text):
        return text

    result = protect_postal_code(text)
    if contains_thai(result):
        result = protect_thai_number_boundary(result)
    return result


def keep_together(text: str | None, phrases: Iterable[str] | None = None) -> str | None:
    """
    Stop a Thai phrase from wrapping in the middle.

    Each space or tab inside a marked phrase becomes a no-break space. When
    ``phrases`` is None, every gap between two Thai characters counts as
    inside a phrase. Line breaks are left alone.
    """
    if not text:
        return text

    if phrases is None:
        return _THAI_GAP_RE.sub(lambda m: NBSP * len(m.group(0)), text)

    out = text
    for phrase in phrases:
        if not phrase:
            continue
        joined = _HSPACE_RE.sub(NBSP, phrase)
        if joined != phrase:
            out = out.replace(phrase, joined)
    return out


def guard_fields(doc: Mapping, fields: Iterable[str]) -> dict:
    """Return a copy of ``doc`` with the named string fields guarded."""
    out = dict(doc)
    for f in fields:
        v = out.get(f)
        if isinstance(v, str):
            out[f] = guard(v)
    return out


def reveal_invisible(text: str) -> str:
    # debug: แสดงอักขระที่มองไม่เห็น
    for ch, label in _INVISIBLE_LABELS.items():
        text = text.replace(ch, label)
    return text
