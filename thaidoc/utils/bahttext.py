from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from functools import lru_cache

from ..exceptions import NegativeAmountError, ThaiNumeralParseError
from .money import require_non_negative, to_decimal

THAI_DIGITS = ["ศูนย์", "หนึ่ง", "สอง", "สาม", "สี่", "ห้า", "หก", "เจ็ด", "แปด", "เก้า"]
THAI_POS = ["", "สิบ", "ร้อย", "พัน", "หมื่น", "แสน"]
THAI_MILLION = "ล้าน"
THAI_ED = "เอ็ด"
THAI_YEE = "ยี่"

BAHT = "บาท"
SATANG = "สตางค์"
EXACT = "ถ้วน"
ZERO_BAHT_TEXT = "ศูนย์บาทถ้วน"

_GROUP = 1_000_000


def _chunk_to_thai(chunk: int) -> str:
    # 0..999999
    if chunk == 0:
        return ""
    parts = []
    digits = [int(d) for d in f"{chunk:06d}"]  # แสน หมื่น พัน ร้อย สิบ หน่วย
    for i, d in enumerate(digits):
        pos_from_right = 5 - i
        if d == 0:
            continue

        if pos_from_right == 1:  # สิบ
            if d == 1:
                parts.append(THAI_POS[1])
            elif d == 2:
                parts.append(THAI_YEE + THAI_POS[1])
            else:
                parts.append(THAI_DIGITS[d] + THAI_POS[1])
        elif pos_from_right == 0:  # หน่วย
            # "เอ็ด" เมื่อกลุ่มนี้มีมากกว่าหนึ่งหลัก และหน่วยเป็น 1
            if d == 1 and chunk > 9:
                parts.append(THAI_ED)
            else:
                parts.append(THAI_DIGITS[d])
        else:
            parts.append(THAI_DIGITS[d] + THAI_POS[pos_from_right])
    return "".join(parts)


def thai_words(n: int) -> str:
    """
    Spell a non-negative integer in Thai words, without any currency.

    ``0`` gives an empty string; the caller decides how zero reads.
    Above a million the number is read in 6-digit groups joined by "ล้าน",
    so ``thai_words(n) == thai_words(n // 10**6) + "ล้าน" + thai_words(n % 10**6)``.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"thai_words() expects an int, got {type(n).__name__}")
    if n < 0:
        raise NegativeAmountError(f"Cannot spell a negative number: {n}", {"value": n})

    groups = []
    while n > 0:
        groups.append(n % _GROUP)
        n //= _GROUP

    out = []
    for i in range(len(groups) - 1, -1, -1):
        out.append(_chunk_to_thai(groups[i]))
        # ทุกกลุ่มที่อยู่เหนือหลักหน่วยต้องมี "ล้าน" แม้กลุ่มล่างจะเป็นศูนย์ (ล้านล้าน)
        if i > 0:
            out.append(THAI_MILLION)
    return "".join(out)


# คำเรียงจากยาวไปสั้น เพื่อให้จับคำได้ถูกเวลาสแกนทีละตำแหน่ง
_WORD_VALUES = sorted(
    [(w, v) for v, w in enumerate(THAI_DIGITS)] + [(THAI_ED, 1), (THAI_YEE, 2)],
    key=lambda wv: -len(wv[0]),
)
_POS_VALUES = {w: 10 ** i for i, w in enumerate(THAI_POS) if w}


def thai_words_to_int(text: str) -> int:
    """Read Thai number words back into an int; the inverse of :func:`thai_words`."""
    total = 0
    group = 0
    pending = None
    i = 0
    while i < len(text):
        if text.startswith(THAI_MILLION, i):
            group += pending or 0
            total = (total + group) * _GROUP
            group, pending = 0, None
            i += len(THAI_MILLION)
            continue

        for word, mult in _POS_VALUES.items():
            if text.startswith(word, i):
                group += (1 if pending is None else pending) * mult
                pending = None
                i += len(word)
                break
        else:
            for word, value in _WORD_VALUES:
                if text.startswith(word, i):
                    pending = value
                    i += len(word)
                    break
            else:
                raise ThaiNumeralParseError(
                    f"Unknown Thai numeral at position {i}: {text[i:i + 8]!r}",
                    {"text": text, "position": i},
                )

    return total + group + (pending or 0)


def split_baht_satang(amount) -> tuple[int, int]:
    """Return ``(baht, satang)`` with satang rounded half-up and carried into baht at 100."""
    d = require_non_negative(to_decimal(amount))

    baht = int(d)  # d >= 0 ดังนั้น int() = floor
    satang = int(((d - baht) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    if satang == 100:
        baht += 1
        satang = 0
    return baht, satang


def thai_baht_text(amount) -> str:
    """
    จำนวนเงิน -> คำอ่านภาษาไทย เช่น 1234.50 -> "หนึ่งพันสองร้อยสามสิบสี่บาทห้าสิบสตางค์"

    Raises NegativeAmountError for amounts below zero and InvalidAmountError
    for values that are not finite numbers.
    """
    baht, satang = split_baht_satang(amount)
    if baht == 0 and satang == 0:
        return ZERO_BAHT_TEXT

    out = ""
    if baht > 0:
        out += thai_words(baht) + BAHT
    if satang > 0:
        out += thai_words(satang) + SATANG
    else:
        out += EXACT
    return out


def thai_baht_text_paren(amount) -> str:
    # แบบที่พิมพ์ใต้ยอดรวม: (หนึ่งร้อยบาทถ้วน)
    return f"({thai_baht_text(amount)})"


def make_cached_baht_text(maxsize: int = 1024):
    """
    Memoised :func:`thai_baht_text`, keyed on the amount.

    Each call builds a fresh cache; inspect it with ``.cache_info()`` and
    empty it with ``.cache_clear()``.
    """
    return lru_cache(maxsize=maxsize)(thai_baht_text)
