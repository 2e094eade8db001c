"""
Document totals: subtotal, VAT 7%, withholding tax, net.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from thaidoc.exceptions import NegativeAmountError
from thaidoc.items import build_item_tree
from thaidoc.models import DocumentTotals, LineItem, TaxConfiguration
from thaidoc.totals import compute_totals
from thaidoc.utils import thai_baht_text


def _items(*amounts) -> list[LineItem]:
    return [LineItem(id=str(i), amount=a) for i, a in enumerate(amounts)]


VAT_AND_WHT3 = TaxConfiguration(has_vat=True, has_withholding_tax=True, withholding_tax_rate=3)


class TestComputeTotals:
    def test_vat_and_withholding(self):
        t = compute_totals(_items(1000, 2000), VAT_AND_WHT3)
        assert t.subtotal == Decimal("3000")
        assert t.vat_amount == Decimal("210")
        assert t.total == Decimal("3210")
        assert t.withholding_tax_amount == Decimal("90")
        assert t.net_total == Decimal("3120")

    def test_values_have_two_decimal_places(self):
        t = compute_totals(_items(1000, 2000), VAT_AND_WHT3)
        assert str(t.subtotal) == "3000.00"
        assert str(t.net_total) == "3120.00"

    def test_no_tax(self):
        t = compute_totals(_items("23500"), TaxConfiguration())
        assert t.total == Decimal("23500")
        assert t.vat_amount == 0
        assert t.withholding_tax_amount == 0
        assert t.net_total == Decimal("23500")

    def test_config_defaults_to_no_tax(self):
        assert compute_totals(_items(100)) == compute_totals(_items(100), TaxConfiguration())

    def test_vat_only(self):
        t = compute_totals(_items(10000, 10000, 3500), TaxConfiguration(has_vat=True))
        assert t.vat_amount == Decimal("1645")
        assert t.total == Decimal("25145")
        assert t.net_total == t.total
        assert thai_baht_text(t.net_total) == "สองหมื่นห้าพันหนึ่งร้อยสี่สิบห้าบาทถ้วน"

    def test_withholding_is_on_subtotal_not_total(self):
        t = compute_totals(_items(1000), VAT_AND_WHT3)
        assert t.withholding_tax_amount == Decimal("30.00")
        assert t.net_total == Decimal("1040.00")

    def test_withholding_without_vat(self):
        cfg = TaxConfiguration(has_withholding_tax=True, withholding_tax_rate=Decimal("1.5"))
        t = compute_totals(_items("2000"), cfg)
        assert t.withholding_tax_amount == Decimal("30.00")
        assert t.net_total == Decimal("1970.00")

    def test_no_float_drift(self):
        t = compute_totals(_items("0.1", "0.2"), TaxConfiguration())
        assert t.subtotal == Decimal("0.30")

    def test_vat_rounds_half_up(self):
        # 1.50 * 0.07 = 0.105 -> 0.11 (half-even จะได้ 0.10)
        t = compute_totals(_items("1.50"), TaxConfiguration(has_vat=True))
        assert t.vat_amount == Decimal("0.11")
        assert t.total == Decimal("1.61")

    def test_printed_lines_reconcile(self):
        t = compute_totals(_items("33.33", "33.33", "33.33"), VAT_AND_WHT3)
        assert t.subtotal == Decimal("99.99")
        assert t.vat_amount == Decimal("7.00")
        assert t.withholding_tax_amount == Decimal("3.00")
        assert t.total == t.subtotal + t.vat_amount
        assert t.net_total == t.total - t.withholding_tax_amount

    def test_sub_items_are_not_counted(self):
        flat = [
            LineItem(id="a", amount=1000),
            LineItem(id="a1", parent_id="a", amount=400),
            LineItem(id="a2", parent_id="a", amount=600),
            LineItem(id="b", amount=500),
        ]
        t = compute_totals(build_item_tree(flat), TaxConfiguration())
        assert t.subtotal == Decimal("1500")

    def test_flat_list_skips_rows_with_parent(self):
        flat = [LineItem(id="a", amount=1000), LineItem(id="a1", parent_id="a", amount=400)]
        assert compute_totals(flat).subtotal == Decimal("1000")

    def test_amount_is_not_recomputed(self):
        it = LineItem(id="a", quantity=2, price_per_unit=100, amount=150)
        assert compute_totals([it]).subtotal == Decimal("150")

    def test_empty(self):
        for roots in ([], None):
            t = compute_totals(roots, VAT_AND_WHT3)
            assert t == DocumentTotals()
            assert t.net_total == 0

    def test_negative_amount_raises(self):
        with pytest.raises(NegativeAmountError):
            compute_totals(_items(100, -1), VAT_AND_WHT3)

    def test_totals_are_frozen(self):
        t = compute_totals(_items(100))
        with pytest.raises(ValidationError):
            t.subtotal = Decimal("1")


class TestTaxConfiguration:
    def test_vat_rate_is_fixed(self):
        assert TaxConfiguration().vat_rate == Decimal("0.07")
        assert TaxConfiguration(has_vat=True).vat_rate == Decimal("0.07")

    @pytest.mark.parametrize("rate", [-1, 100.01, 101])
    def test_rate_out_of_range(self, rate):
        with pytest.raises(ValidationError):
            TaxConfiguration(has_withholding_tax=True, withholding_tax_rate=rate)

    @pytest.mark.parametrize("rate", [0, 3, 100])
    def test_rate_in_range(self, rate):
        assert TaxConfiguration(withholding_tax_rate=rate).withholding_tax_rate == Decimal(rate)

    def test_camel_case_payload(self):
        cfg = TaxConfiguration.model_validate({"hasVat": True, "hasWithholdingTax": True, "withholdingTaxPercent": 3})
        assert cfg.has_vat and cfg.has_withholding_tax
        assert cfg.withholding_tax_rate == Decimal("3")
