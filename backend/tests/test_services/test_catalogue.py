"""Tests for denomination catalogue helpers."""

from chipcalc.models.chip_set import Denomination
from chipcalc.services.catalogue import (
    DEFAULT_CHIP_COLORS,
    PRESET_CHIP_SETS,
    active_denominations,
    apply_standard_distribution,
    get_default_color,
    get_default_quantity,
    standard_300_chip_set,
    standard_500_chip_set,
    total_chip_count,
    total_supply_value,
)


class TestDefaults:

    def test_known_color(self):
        assert get_default_color(5) == "#EF4444"
        assert get_default_color(5000) == DEFAULT_CHIP_COLORS[5000]

    def test_custom_color_derived_from_value(self):
        assert get_default_color(7) == "hsl(259, 70%, 50%)"

    def test_known_quantity(self):
        assert get_default_quantity(25) == 75
        assert get_default_quantity(1000) == 25

    def test_custom_quantity(self):
        assert get_default_quantity(3) == 20


class TestTotals:

    def test_total_chip_count(self, standard_denominations):
        assert total_chip_count(standard_denominations) == 190

    def test_total_supply_value(self, standard_denominations):
        assert total_supply_value(standard_denominations) == 5250

    def test_zero_quantity_excluded(self):
        denoms = [
            Denomination(value=100, quantity=0, color="#000000"),
            Denomination(value=25, quantity=4, color="#22C55E"),
        ]
        assert [d.value for d in active_denominations(denoms)] == [25]
        assert total_supply_value(denoms) == 100


class TestStandardSets:

    def test_standard_300(self):
        denoms = standard_300_chip_set()
        assert total_chip_count(denoms) == 300
        assert [d.quantity for d in denoms] == [50, 50, 50, 50, 50, 30, 20]

    def test_standard_500(self):
        denoms = standard_500_chip_set()
        assert total_chip_count(denoms) == 500
        assert [d.value for d in denoms] == [5, 10, 25, 50, 100, 500, 1000]

    def test_apply_keeps_custom_color_and_name(self):
        denoms = [
            Denomination(value=5, quantity=200, color="#123456", name="Mine"),
            Denomination(value=100, quantity=100, color="#654321"),
        ]
        result = apply_standard_distribution(denoms)

        assert result is not None
        assert total_chip_count(result) == 300
        by_value = {d.value: d for d in result}
        assert by_value[5].color == "#123456"
        assert by_value[5].name == "Mine"
        assert by_value[5].quantity == 50
        assert by_value[100].color == "#654321"
        assert by_value[500].color == DEFAULT_CHIP_COLORS[500]

    def test_apply_500(self):
        denoms = [Denomination(value=25, quantity=500, color="#22C55E")]
        result = apply_standard_distribution(denoms)
        assert result is not None
        assert total_chip_count(result) == 500

    def test_apply_other_totals(self):
        denoms = [Denomination(value=25, quantity=123, color="#22C55E")]
        assert apply_standard_distribution(denoms) is None

    def test_apply_does_not_mutate_input(self):
        denoms = [Denomination(value=5, quantity=300, color="#123456")]
        apply_standard_distribution(denoms)
        assert denoms[0].quantity == 300

    def test_preset_is_valid_standard_set(self):
        assert PRESET_CHIP_SETS[0]["name"] == "Standard"
        assert total_chip_count(PRESET_CHIP_SETS[0]["denominations"]) == 500
