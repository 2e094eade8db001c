from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import NamedTuple

from .exceptions import InvalidAmountError
from .models import ItemNode, LineItem
from .utils.money import to_decimal

logger = logging.getLogger(__name__)


class ItemTree(NamedTuple):
    roots: list[ItemNode]
    orphans: list[LineItem]


def _as_line_item(item) -> LineItem:
    if type(item) is LineItem:
        return item
    if isinstance(item, LineItem):
        # ItemNode ที่ส่งกลับเข้ามา: ทิ้ง sub_items เดิม
        return LineItem(**item.model_dump(exclude={"sub_items"}))
    if isinstance(item, Mapping):
        return LineItem.model_validate(item)
    return LineItem.model_validate(item, from_attributes=True)


def split_item_tree(items: Iterable[LineItem | Mapping] | None) -> ItemTree:
    """
    Rebuild the parent / sub-item hierarchy from a flat list.

    Pass 1 puts every item in an arena and maps its id to the arena slot.
    Pass 2 walks the input again: items without a parent become roots in
    input order, items whose parent is a top-level item are appended to
    that parent's ``sub_items``, and everything else is an orphan.

    Children are not re-sorted; sort the input with :func:`sort_items` first
    if ``order`` matters. The input is never modified.
    """
    flat = [_as_line_item(it) for it in (items or [])]

    # pass 1: arena + id -> index (id ซ้ำ ใช้ตัวหลังสุด)
    arena: list[ItemNode] = []
    index: dict[str, int] = {}
    for it in flat:
        index[it.id] = len(arena)
        arena.append(ItemNode(**it.model_dump()))

    # pass 2
    roots: list[ItemNode] = []
    orphans: list[LineItem] = []
    for pos, it in enumerate(flat):
        if it.parent_id is None:
            roots.append(arena[pos])
            continue

        parent_pos = index.get(it.parent_id)
        if parent_pos is None or arena[parent_pos].parent_id is not None:
            # ไม่เจอรายการแม่ หรือแม่เป็นรายการย่อยเอง (รองรับแค่ 2 ชั้น)
            logger.debug("Dropping orphan item %r (parent %r)", it.id, it.parent_id)
            orphans.append(it)
            continue

        arena[parent_pos].sub_items.append(it)

    return ItemTree(roots, orphans)


def build_item_tree(items: Iterable[LineItem | Mapping] | None) -> list[ItemNode]:
    tree = split_item_tree(items)
    if tree.orphans:
        logger.debug("Dropped %d orphan item(s)", len(tree.orphans))
    return tree.roots


def sort_items(items: Iterable[LineItem | Mapping]) -> list[LineItem]:
    """Stable sort on ``order``; items with the same order keep their input position."""
    return sorted((_as_line_item(it) for it in items), key=lambda it: it.order)


def flatten_item_tree(roots: Iterable[ItemNode]) -> list[LineItem]:
    """
    Turn a tree back into the flat rows that get saved.

    ``order`` is renumbered from 0 within each sibling group and sub-items
    point at their parent's id.
    """
    out: list[LineItem] = []
    for i, node in enumerate(roots):
        parent = LineItem(**node.model_dump(exclude={"sub_items"}))
        out.append(parent.model_copy(update={"order": i, "parent_id": None}))
        for j, sub in enumerate(node.sub_items):
            out.append(sub.model_copy(update={"order": j, "parent_id": parent.id}))
    return out


# ชื่อช่องในฟอร์มที่รองรับ (snake_case / camelCase / ชื่อคอลัมน์เดิม)
_FORM_FIELDS = {
    "description": ("description",),
    "quantity": ("quantity", "qty"),
    "unit": ("unit",),
    "price_per_unit": ("price_per_unit", "pricePerUnit", "unit_price"),
    "sub_items": ("sub_items", "subItems"),
}


def _raw(row, field: str):
    for name in _FORM_FIELDS[field]:
        if isinstance(row, Mapping):
            if name in row:
                return row[name]
        elif hasattr(row, name):
            return getattr(row, name)
    return None


def _number(v) -> Decimal | None:
    try:
        return to_decimal(v)
    except InvalidAmountError:
        return None


def validate_items(items: Iterable[LineItem | Mapping]) -> list[str]:
    """
    Form-level checks for a submitted item list. Returns error messages, empty if OK.

    Works on the raw values, so blank or missing form fields become messages
    instead of model validation errors. Accepts a flat list, ItemNode objects,
    or form payloads with ``subItems``.
    """
    errors: list[str] = []
    rows = list(items or [])
    if not rows:
        errors.append("At least one item is required")
        return errors

    for i, row in enumerate(rows, start=1):
        label = f"Item {i}"
        errors.extend(_item_errors(row, label, check_price=True))

        for j, sub in enumerate(_raw(row, "sub_items") or [], start=1):
            errors.extend(_item_errors(sub, f"{label}, Sub-item {j}", check_price=False))

    return errors


def _item_errors(row, label: str, check_price: bool) -> list[str]:
    errors = []
    if not str(_raw(row, "description") or "").strip():
        errors.append(f"{label}: Description is required")

    qty = _number(_raw(row, "quantity"))
    if qty is None or qty <= 0:
        errors.append(f"{label}: Quantity must be greater than 0")

    if not str(_raw(row, "unit") or "").strip():
        errors.append(f"{label}: Unit is required")

    if check_price:
        raw_price = _raw(row, "price_per_unit")
        price = None if raw_price is None else _number(raw_price)
        if price is None or price < 0:
            errors.append(f"{label}: Price per unit must be 0 or greater")
    return errors
