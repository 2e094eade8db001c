from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from ..exceptions import InvalidAmountError, NegativeAmountError

ZERO = Decimal("0")
CENT = Decimal("0.01")


def to_decimal(v) -> Decimal:
    """
    แปลงค่าเงินเป็น Decimal
    - float แปลงผ่าน str() เพื่อไม่ให้ติดเศษทศนิยมแบบ binary (0.1 -> "0.1")
    - None / "" = 0
    - รองรับ "1,250.50"
    """
    if v is None:
        return ZERO
    if isinstance(v, bool):
        raise InvalidAmountError(f"Not a money amount: {v!r}", {"value": v})
    if isinstance(v, Decimal):
        d = v
    else:
        s = str(v).strip().replace(",", "")
        if s == "":
            return ZERO
        try:
            d = Decimal(s)
        except InvalidOperation:
            raise InvalidAmountError(f"Not a money amount: {v!r}", {"value": str(v)}) from None

    if not d.is_finite():
        raise InvalidAmountError(f"Amount must be finite: {v!r}", {"value": str(v)})
    return d


def require_non_negative(d: Decimal, what: str = "amount") -> Decimal:
    if d < 0:
        raise NegativeAmountError(f"{what} must not be negative (got {d})", {"field": what, "value": str(d)})
    return d


def q2(v: Decimal) -> Decimal:
    # ปัดเศษ 2 ตำแหน่งแบบ half-up (.005 -> .01)
    return v.quantize(CENT, rounding=ROUND_HALF_UP)


def fmt_money(v) -> str:
    # 1234.5 -> "1,234.50"
    return f"{q2(to_decimal(v)):,.2f}"
