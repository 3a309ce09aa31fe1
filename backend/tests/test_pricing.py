"""Tests for the pure pricing functions."""

from __future__ import annotations

import math

import pytest

from paintquote.models.inputs import ChargeRates, PaintCosts, ProjectAreas
from paintquote.pricing import (
    DEFAULT_COVERAGE_SQFT_PER_GALLON,
    DEFAULT_LABOR_PERCENT,
    calculate_labor,
    calculate_materials,
    calculate_profit,
    calculate_quote,
    calculate_revenue,
    gallons_needed,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _areas(
    walls: float = 1000.0, ceilings: float = 1000.0, trim: float = 520.0,
) -> ProjectAreas:
    return ProjectAreas(walls_sqft=walls, ceilings_sqft=ceilings, trim_sqft=trim)


def _rates(
    walls: float = 3.00, ceilings: float = 2.00, trim: float = 1.92,
) -> ChargeRates:
    return ChargeRates(walls_rate=walls, ceilings_rate=ceilings, trim_rate=trim)


def _paint_costs(
    walls: float = 26.00, ceilings: float = 25.00, trim: float = 35.00,
) -> PaintCosts:
    return PaintCosts(
        walls_paint_cost=walls, ceilings_paint_cost=ceilings, trim_paint_cost=trim,
    )


# ---------------------------------------------------------------------------
# Reference job
# ---------------------------------------------------------------------------


class TestReferenceJob:
    """1000 walls / 1000 ceilings / 520 trim at the standard rates."""

    def test_revenue(self) -> None:
        revenue = calculate_quote(_areas(), _rates(), _paint_costs()).revenue
        assert revenue.walls == pytest.approx(3000.0)
        assert revenue.ceilings == pytest.approx(2000.0)
        assert revenue.trim == pytest.approx(998.40)
        assert revenue.total == pytest.approx(5998.40)

    def test_materials(self) -> None:
        materials = calculate_quote(_areas(), _rates(), _paint_costs()).materials
        assert materials.walls.gallons == 3
        assert materials.walls.cost == pytest.approx(78.0)
        assert materials.ceilings.gallons == 3
        assert materials.ceilings.cost == pytest.approx(75.0)
        assert materials.trim.gallons == 2
        assert materials.trim.cost == pytest.approx(70.0)
        assert materials.total == pytest.approx(223.0)

    def test_labor(self) -> None:
        labor = calculate_quote(_areas(), _rates(), _paint_costs()).labor
        assert labor.revenue_after_materials == pytest.approx(5775.40)
        assert labor.projected_labor == pytest.approx(1732.62)
        assert labor.labor_percentage == 30

    def test_profit(self) -> None:
        quote = calculate_quote(_areas(), _rates(), _paint_costs())
        # 5998.40 - 223 - 1732.62
        assert quote.profit == pytest.approx(4042.78)


# ---------------------------------------------------------------------------
# Revenue
# ---------------------------------------------------------------------------


class TestRevenue:
    def test_total_is_exact_sum_of_parts(self) -> None:
        revenue = calculate_revenue(_areas(1234.5, 987.25, 333.3), _rates(2.85, 1.17, 3.33))
        assert revenue.total == revenue.walls + revenue.ceilings + revenue.trim

    def test_zero_area_surface_contributes_nothing(self) -> None:
        revenue = calculate_revenue(_areas(ceilings=0.0), _rates(ceilings=9.99))
        assert revenue.ceilings == 0.0
        assert revenue.total == pytest.approx(3000.0 + 998.40)

    def test_zero_rate_surface_contributes_nothing(self) -> None:
        revenue = calculate_revenue(_areas(), _rates(trim=0.0))
        assert revenue.trim == 0.0

    def test_no_rounding_applied(self) -> None:
        revenue = calculate_revenue(_areas(1.0, 0.0, 0.0), _rates(walls=0.333))
        assert revenue.walls == 0.333

    @pytest.mark.parametrize("bump", [0.01, 0.5, 10.0])
    def test_raising_a_rate_never_lowers_revenue(self, bump: float) -> None:
        base = calculate_revenue(_areas(), _rates())
        higher = calculate_revenue(_areas(), _rates(walls=3.00 + bump))
        assert higher.total >= base.total


# ---------------------------------------------------------------------------
# Materials
# ---------------------------------------------------------------------------


class TestGallonsRounding:
    def test_zero_area_needs_no_paint(self) -> None:
        assert gallons_needed(0.0, 350.0) == 0

    def test_exact_coverage_is_one_gallon(self) -> None:
        assert gallons_needed(350.0, 350.0) == 1

    def test_any_overage_rounds_up(self) -> None:
        assert gallons_needed(351.0, 350.0) == 2

    def test_small_area_still_needs_a_gallon(self) -> None:
        assert gallons_needed(1.0, 350.0) == 1

    @pytest.mark.parametrize("area", [0.0, 1.0, 349.9, 350.0, 700.0, 700.1, 12_345.0])
    def test_matches_ceiling_of_quotient(self, area: float) -> None:
        assert gallons_needed(area, 350.0) == math.ceil(area / 350.0)

    def test_negative_area_never_yields_negative_gallons(self) -> None:
        assert gallons_needed(-1000.0, 350.0) == 0

    def test_negative_infinite_area_clamps_to_zero(self) -> None:
        assert gallons_needed(float("-inf"), 350.0) == 0

    def test_negative_area_with_zero_coverage_clamps_to_zero(self) -> None:
        assert gallons_needed(-100.0, 0.0) == 0

    def test_gallons_is_an_int(self) -> None:
        assert isinstance(gallons_needed(1000.0, 350.0), int)


class TestMaterials:
    def test_default_coverage_is_350(self) -> None:
        assert DEFAULT_COVERAGE_SQFT_PER_GALLON == 350
        materials = calculate_materials(_areas(walls=700.0), _paint_costs())
        assert materials.walls.gallons == 2

    def test_custom_coverage(self) -> None:
        materials = calculate_materials(_areas(walls=1000.0), _paint_costs(), coverage=400.0)
        assert materials.walls.gallons == 3
        assert materials.walls.cost == pytest.approx(78.0)

    def test_zero_area_surface_costs_nothing(self) -> None:
        materials = calculate_materials(_areas(ceilings=0.0), _paint_costs())
        assert materials.ceilings.gallons == 0
        assert materials.ceilings.cost == 0.0

    def test_total_is_sum_of_surface_costs(self) -> None:
        materials = calculate_materials(_areas(), _paint_costs(41.5, 38.25, 52.0))
        assert materials.total == (
            materials.walls.cost + materials.ceilings.cost + materials.trim.cost
        )

    def test_zero_coverage_yields_infinite_gallons_without_raising(self) -> None:
        materials = calculate_materials(_areas(), _paint_costs(), coverage=0.0)
        assert materials.walls.gallons == math.inf
        assert materials.trim.gallons == math.inf
        assert math.isinf(materials.total)

    def test_zero_coverage_on_unpainted_surface_is_nan(self) -> None:
        materials = calculate_materials(_areas(ceilings=0.0), _paint_costs(), coverage=0.0)
        assert math.isnan(materials.ceilings.gallons)
        assert math.isnan(materials.ceilings.cost)

    def test_zero_coverage_propagates_through_quote(self) -> None:
        quote = calculate_quote(
            ProjectAreas(walls_sqft=1000), _rates(), _paint_costs(), coverage=0.0,
        )
        assert quote.materials.walls.gallons == math.inf
        assert math.isnan(quote.profit)

    @pytest.mark.parametrize("bump", [0.01, 1.0, 20.0])
    def test_raising_a_paint_cost_never_lowers_materials(self, bump: float) -> None:
        base = calculate_materials(_areas(), _paint_costs())
        higher = calculate_materials(_areas(), _paint_costs(trim=35.00 + bump))
        assert higher.total >= base.total


# ---------------------------------------------------------------------------
# Labor and profit
# ---------------------------------------------------------------------------


class TestLabor:
    def test_percentage_applies_to_margin_not_revenue(self) -> None:
        labor = calculate_labor(1000.0, 200.0, 25.0)
        assert labor.revenue_after_materials == pytest.approx(800.0)
        assert labor.projected_labor == pytest.approx(200.0)

    def test_default_percentage_is_30(self) -> None:
        labor = calculate_labor(1000.0, 0.0)
        assert DEFAULT_LABOR_PERCENT == 30
        assert labor.labor_percentage == 30
        assert labor.projected_labor == pytest.approx(300.0)

    def test_percentage_is_echoed(self) -> None:
        assert calculate_labor(1000.0, 0.0, 42.5).labor_percentage == 42.5

    def test_materials_above_revenue_goes_negative(self) -> None:
        labor = calculate_labor(1000.0, 1200.0, 30.0)
        assert labor.revenue_after_materials == pytest.approx(-200.0)
        assert labor.projected_labor == pytest.approx(-60.0)


class TestProfit:
    def test_simple_subtraction(self) -> None:
        assert calculate_profit(1000.0, 200.0, 240.0) == pytest.approx(560.0)

    def test_negative_profit_is_not_floored(self) -> None:
        assert calculate_profit(100.0, 200.0, 50.0) == pytest.approx(-150.0)


# ---------------------------------------------------------------------------
# Quote composition
# ---------------------------------------------------------------------------


class TestQuoteComposition:
    def test_profit_identity(self) -> None:
        quote = calculate_quote(_areas(812.0, 640.5, 219.0), _rates(2.75, 1.85, 2.10),
                                _paint_costs(44.0, 39.0, 58.0), 35.0, 400.0)
        assert quote.profit == (
            quote.revenue.total - quote.materials.total - quote.labor.projected_labor
        )

    def test_labor_base_identity(self) -> None:
        quote = calculate_quote(_areas(), _rates(), _paint_costs(), labor_percent=22.0)
        assert quote.labor.projected_labor == (
            (quote.revenue.total - quote.materials.total) * (22.0 / 100)
        )

    def test_repeated_calls_are_identical(self) -> None:
        first = calculate_quote(_areas(), _rates(), _paint_costs())
        second = calculate_quote(_areas(), _rates(), _paint_costs())
        assert first == second
        assert first.model_dump() == second.model_dump()

    def test_loss_making_job_keeps_negative_profit(self) -> None:
        # 100 sqft at $0.10 earns $10 but needs a $26 gallon of paint
        quote = calculate_quote(_areas(100.0, 0.0, 0.0), _rates(walls=0.10), _paint_costs())
        assert quote.materials.total > quote.revenue.total
        assert quote.labor.projected_labor == pytest.approx(-4.8)
        assert quote.profit == pytest.approx(-11.2)
        assert quote.profit < 0

    def test_empty_job(self) -> None:
        quote = calculate_quote(_areas(0.0, 0.0, 0.0), _rates(), _paint_costs())
        assert quote.revenue.total == 0.0
        assert quote.materials.total == 0.0
        assert quote.profit == 0.0


# ---------------------------------------------------------------------------
# Non-finite propagation
# ---------------------------------------------------------------------------


class TestNonFinitePropagation:
    def test_nan_area_propagates_without_raising(self) -> None:
        quote = calculate_quote(_areas(walls=float("nan")), _rates(), _paint_costs())
        assert math.isnan(quote.revenue.walls)
        assert math.isnan(quote.revenue.total)
        assert math.isnan(quote.materials.walls.gallons)
        assert math.isnan(quote.materials.total)
        assert math.isnan(quote.labor.projected_labor)
        assert math.isnan(quote.profit)

    def test_nan_rate_leaves_materials_intact(self) -> None:
        quote = calculate_quote(_areas(), _rates(trim=float("nan")), _paint_costs())
        assert math.isnan(quote.revenue.total)
        assert quote.materials.total == pytest.approx(223.0)
        assert math.isnan(quote.profit)

    def test_infinite_area_yields_infinite_gallons(self) -> None:
        materials = calculate_materials(_areas(walls=float("inf")), _paint_costs())
        assert math.isinf(materials.walls.gallons)
        assert math.isinf(materials.total)
