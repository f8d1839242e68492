"""Tests for Child Tax Credit and EITC calculators (2024 tables)."""

from decimal import Decimal

import pytest

from fedtax.engines.brackets import TAX_YEAR_TABLES
from fedtax.engines.credits import compute_child_tax_credit, compute_eitc
from fedtax.models.enums import FilingStatus

CTC_2024 = TAX_YEAR_TABLES[2024].child_tax_credit
EITC_2024 = TAX_YEAR_TABLES[2024].eitc


def ctc(agi, dependents, status=FilingStatus.SINGLE):
    return compute_child_tax_credit(Decimal(agi), dependents, status, CTC_2024)


def eitc(agi, dependents, status=FilingStatus.SINGLE):
    return compute_eitc(Decimal(agi), dependents, status, EITC_2024)


class TestChildTaxCredit:
    def test_no_dependents(self):
        assert ctc("50000", 0) == Decimal("0")

    def test_negative_dependents_treated_as_none(self):
        assert ctc("50000", -2) == Decimal("0")

    def test_full_credit_below_threshold(self):
        assert ctc("80000", 3) == Decimal("6000")

    def test_full_credit_at_threshold(self):
        assert ctc("200000", 2) == Decimal("4000")

    def test_one_increment_at_threshold_plus_1000(self):
        assert ctc("201000", 2) == Decimal("3950")

    def test_one_dollar_over_costs_a_full_step(self):
        assert ctc("200001", 2) == Decimal("3950")

    def test_partial_thousand_rounds_up(self):
        assert ctc("202500", 2) == Decimal("3850")

    def test_never_negative(self):
        assert ctc("500000", 1) == Decimal("0")

    def test_joint_threshold(self):
        assert ctc("400000", 1, FilingStatus.MFJ) == Decimal("2000")
        assert ctc("401000", 1, FilingStatus.MFJ) == Decimal("1950")

    @pytest.mark.parametrize("status", [FilingStatus.MFS, FilingStatus.HOH])
    def test_other_statuses_use_single_threshold(self, status):
        assert ctc("210000", 1, status) == Decimal("1500")


class TestEITC:
    def test_above_limit_is_zero(self):
        assert eitc("18592", 0) == Decimal("0")

    def test_full_credit_well_below_start(self):
        assert eitc("30000", 1) == Decimal("4213")

    def test_full_credit_at_phase_out_start(self):
        # 70% of the $49,084 limit
        assert eitc("34358.8", 1) == Decimal("4213")

    def test_zero_at_limit(self):
        assert eitc("49084", 1) == Decimal("0")

    def test_linear_midpoint(self):
        # MFJ two children: limit 62,688, start 43,881.60, midpoint 53,284.80
        assert eitc("53284.8", 2, FilingStatus.MFJ) == Decimal("3480.00")

    def test_phase_out_rounded_to_cents(self):
        credit = eitc("50000", 1, FilingStatus.MFJ)
        assert Decimal("0") < credit < Decimal("4213")
        assert credit == Decimal("1505.54")

    def test_three_or_more_children_share_top_tier(self):
        assert eitc("10000", 3) == Decimal("7830")
        assert eitc("10000", 6) == Decimal("7830")

    @pytest.mark.parametrize("status", [FilingStatus.SINGLE, FilingStatus.MFS, FilingStatus.HOH])
    def test_non_joint_statuses_share_limit(self, status):
        assert eitc("50000", 1, status) == Decimal("0")

    def test_joint_limit_is_higher(self):
        assert eitc("50000", 1, FilingStatus.MFJ) > Decimal("0")

    def test_decreases_through_phase_out(self):
        previous = None
        for agi in range(43000, 62689, 500):
            credit = eitc(str(agi), 2, FilingStatus.MFJ)
            if previous is not None:
                assert credit <= previous
            previous = credit
