from __future__ import annotations

import logging
from collections.abc import Iterable

from .models import VAT_RATE, DocumentTotals, LineItem, TaxConfiguration
from .utils.money import ZERO, q2, require_non_negative, to_decimal

logger = logging.getLogger(__name__)


def compute_totals(
    root_items: Iterable[LineItem] | None,
    config: TaxConfiguration | None = None,
) -> DocumentTotals:
    """
    Subtotal / VAT / WHT / net for a document.

    Only top-level items are summed; a sub-item's amount is shown on the
    document but never counted, and rows that still carry a ``parent_id``
    are skipped if a flat list is passed in. WHT is taken on the subtotal, not on the
    VAT-inclusive total. VAT and WHT are rounded to satang before they are
    added or subtracted, so the printed lines always add up.
    """
    config = config or TaxConfiguration()

    subtotal = ZERO
    for it in root_items or []:
        if it.parent_id is not None:
            continue
        amount = require_non_negative(to_decimal(it.amount), f"amount of item {it.id!r}")
        subtotal += amount
    subtotal = q2(subtotal)

    vat_amount = q2(subtotal * VAT_RATE) if config.has_vat else q2(ZERO)
    total = subtotal + vat_amount

    if config.has_withholding_tax:
        wht_amount = q2(subtotal * config.withholding_tax_rate / 100)
    else:
        wht_amount = q2(ZERO)
    net_total = total - wht_amount

    logger.debug(
        "Totals: subtotal=%s vat=%s total=%s wht=%s net=%s",
        subtotal, vat_amount, total, wht_amount, net_total,
    )
    return DocumentTotals(
        subtotal=subtotal,
        vat_amount=vat_amount,
        total=total,
        withholding_tax_amount=wht_amount,
        net_total=net_total,
    )
