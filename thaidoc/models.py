"""
Pydantic models for line items, tax flags and computed totals.

These are request-scoped values: built from rows the data layer already
fetched, used for one render, then thrown away.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

VAT_RATE = Decimal("0.07")


class LineItem(BaseModel):
    """One row of a quotation / receipt / invoice.

    ``amount`` is taken as stored; it is not recomputed from
    ``quantity * price_per_unit`` so manual overrides survive.
    """

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    id: str
    description: str = ""
    quantity: Decimal = Decimal("0")
    unit: str = ""
    price_per_unit: Decimal = Field(
        default=Decimal("0"),
        validation_alias=AliasChoices("price_per_unit", "pricePerUnit", "unit_price"),
    )
    amount: Decimal = Decimal("0")
    order: int = 0
    parent_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("parent_id", "parentId", "parentItemId"),
    )

    @field_validator("parent_id", mode="before")
    @classmethod
    def _blank_parent_is_none(cls, v):
        # "" หรือช่องว่าง = ไม่มีรายการแม่
        if v is None:
            return None
        s = str(v).strip()
        return s or None


class ItemNode(LineItem):
    """A top-level item with its sub-items in ``order`` sequence."""

    sub_items: list[LineItem] = Field(
        default_factory=list,
        validation_alias=AliasChoices("sub_items", "subItems"),
    )


class TaxConfiguration(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    has_vat: bool = Field(default=False, validation_alias=AliasChoices("has_vat", "hasVat"))
    has_withholding_tax: bool = Field(
        default=False,
        validation_alias=AliasChoices("has_withholding_tax", "hasWithholdingTax"),
    )
    # เปอร์เซ็นต์ เช่น 3 = 3%
    withholding_tax_rate: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        le=100,
        validation_alias=AliasChoices("withholding_tax_rate", "withholdingTaxPercent", "wht_rate"),
    )

    @property
    def vat_rate(self) -> Decimal:
        return VAT_RATE


class DocumentTotals(BaseModel):
    model_config = ConfigDict(frozen=True)

    subtotal: Decimal = Decimal("0.00")
    vat_amount: Decimal = Decimal("0.00")
    total: Decimal = Decimal("0.00")
    withholding_tax_amount: Decimal = Decimal("0.00")
    net_total: Decimal = Decimal("0.00")
