from __future__ import annotations

from collections.abc import Iterable, Mapping

from flask import current_app, render_template

from .items import split_item_tree
from .models import ItemNode, LineItem, TaxConfiguration
from .totals import compute_totals
from .utils import guard, guard_fields, thai_baht_text

DOC_TITLE = {
    "QT": "ใบเสนอราคา",
    "IV": "ใบแจ้งหนี้",
    "RC": "ใบเสร็จรับเงิน",
}

# ข้อความอิสระที่ต้องกันตัดบรรทัดก่อนส่งไปทำ PDF
GUARDED_FIELDS = (
    "company_name",
    "company_address",
    "company_phone",
    "customer_name",
    "customer_address",
    "customer_phone",
    "subject",
    "notes",
    "payment_method",
    "signature_name",
    "signature_title",
)


def _guard_item(item: LineItem) -> LineItem:
    return item.model_copy(update={"description": guard(item.description)})


def _guard_node(node: ItemNode) -> ItemNode:
    return node.model_copy(
        update={
            "description": guard(node.description),
            "sub_items": [_guard_item(s) for s in node.sub_items],
        }
    )


def prepare_document(
    header: Mapping,
    items: Iterable[LineItem | Mapping] | None,
    tax: TaxConfiguration | Mapping | None = None,
    baht_text=None,
) -> dict:
    """
    Assemble everything a print template needs from already-fetched rows.

    items -> tree -> totals -> amount in words, then every free-text field
    (header fields in GUARDED_FIELDS and item descriptions) is guarded.
    ``baht_text`` lets the app pass its memoised formatter.
    """
    if tax is None or isinstance(tax, Mapping):
        tax = TaxConfiguration.model_validate(tax or {})
    baht_text = baht_text or thai_baht_text

    tree = split_item_tree(items)
    totals = compute_totals(tree.roots, tax)

    doc = guard_fields(header, GUARDED_FIELDS)
    doc.update(
        items=[_guard_node(n) for n in tree.roots],
        orphans=tree.orphans,
        tax=tax,
        totals=totals,
        amount_words=baht_text(totals.net_total),
    )
    return doc


def render_document(
    header: Mapping,
    items: Iterable[LineItem | Mapping] | None,
    tax: TaxConfiguration | Mapping | None = None,
    template: str = "document.html",
) -> str:
    """Render the HTML print view. Needs an app context (see ``create_app``)."""
    ext = current_app.extensions.get("thaidoc", {})
    doc = prepare_document(header, items, tax, baht_text=ext.get("baht_text"))
    doc_type = (doc.get("doc_type") or "QT").upper()
    return render_template(template, doc=doc, doc_title=DOC_TITLE.get(doc_type, doc_type))
