# thaidoc/utils/__init__.py
from __future__ import annotations

from .bahttext import (
    make_cached_baht_text,
    split_baht_satang,
    thai_baht_text,
    thai_baht_text_paren,
    thai_words,
    thai_words_to_int,
)
from .money import fmt_money, q2, to_decimal
from .thai_text import (
    contains_digits,
    contains_thai,
    guard,
    guard_fields,
    keep_together,
    reveal_invisible,
)

__all__ = [
    "contains_digits",
    "contains_thai",
    "fmt_money",
    "guard",
    "guard_fields",
    "keep_together",
    "make_cached_baht_text",
    "q2",
    "reveal_invisible",
    "split_baht_satang",
    "thai_baht_text",
    "thai_baht_text_paren",
    "thai_words",
    "thai_words_to_int",
    "to_decimal",
]
