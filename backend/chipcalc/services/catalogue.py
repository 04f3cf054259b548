"""Denomination catalogue helpers.

Default colors and quantities for common face values, the standard
300- and 500-chip layouts, and the aggregate figures shared by the
feasibility check and the allocator. No database access, no async.
"""

from chipcalc.models.chip_set import Denomination

# Default chip colors matching poker chip aesthetics
DEFAULT_CHIP_COLORS: dict[int, str] = {
    5: "#EF4444",  # Red
    10: "#1E3A8A",  # Dark Blue
    25: "#22C55E",  # Green
    50: "#3B82F6",  # Light Blue
    100: "#1F2937",  # Black
    500: "#8B5CF6",  # Purple
    1000: "#FBBF24",  # Yellow
    5000: "#EC4899",  # Pink
}

# Default quantities for common denominations (500 chips total)
DEFAULT_CHIP_QUANTITIES: dict[int, int] = {
    5: 100,
    10: 100,
    25: 75,
    50: 75,
    100: 75,
    500: 50,
    1000: 25,
}

_DEFAULT_CUSTOM_QUANTITY = 20

_STANDARD_NAMES: dict[int, str] = {
    5: "Red",
    10: "Dark Blue",
    25: "Green",
    50: "Light Blue",
    100: "Black",
    500: "Purple",
    1000: "Yellow",
}

# value -> quantity for the two standard boxed sets
_STANDARD_300_LAYOUT: dict[int, int] = {
    5: 50, 10: 50, 25: 50, 50: 50, 100: 50, 500: 30, 1000: 20,
}
_STANDARD_500_LAYOUT: dict[int, int] = {
    5: 100, 10: 100, 25: 75, 50: 75, 100: 75, 500: 50, 1000: 25,
}


def get_default_color(value: int) -> str:
    """Return the catalogue color for a value, or a hue derived from it."""
    if value in DEFAULT_CHIP_COLORS:
        return DEFAULT_CHIP_COLORS[value]
    hue = (value * 37) % 360
    return f"hsl({hue}, 70%, 50%)"


def get_default_quantity(value: int) -> int:
    """Return the catalogue quantity for a value, 20 for custom values."""
    return DEFAULT_CHIP_QUANTITIES.get(value, _DEFAULT_CUSTOM_QUANTITY)


def total_chip_count(denominations: list[Denomination]) -> int:
    """Physical chips in a set, summed over every denomination."""
    return sum(d.quantity for d in denominations)


def active_denominations(denominations: list[Denomination]) -> list[Denomination]:
    """Denominations that can take part in a calculation.

    Zero-quantity entries stay in the set but are ignored here, as are
    non-positive face values that a draft may still contain.
    """
    return [d for d in denominations if d.quantity > 0 and d.value > 0]


def total_supply_value(denominations: list[Denomination]) -> int:
    """Total point value of the chips available in a set."""
    return sum(d.value * d.quantity for d in active_denominations(denominations))


def _build_layout(layout: dict[int, int]) -> list[Denomination]:
    return [
        Denomination(
            value=value,
            quantity=quantity,
            color=DEFAULT_CHIP_COLORS[value],
            name=_STANDARD_NAMES[value],
        )
        for value, quantity in layout.items()
    ]


def standard_300_chip_set() -> list[Denomination]:
    """Standard 300-chip set: 50/50/50/50/50/30/20."""
    return _build_layout(_STANDARD_300_LAYOUT)


def standard_500_chip_set() -> list[Denomination]:
    """Standard 500-chip set: 100/100/75/75/75/50/25."""
    return _build_layout(_STANDARD_500_LAYOUT)


def apply_standard_distribution(
    denominations: list[Denomination],
) -> list[Denomination] | None:
    """Replace a 300- or 500-chip set with its standard layout.

    Custom colors and names are kept for values present in both the
    existing set and the standard layout; only quantities change.

    Returns:
        The standardized denominations, or None when the set holds
        neither 300 nor 500 chips.
    """
    total = total_chip_count(denominations)
    if total == 300:
        standard = standard_300_chip_set()
    elif total == 500:
        standard = standard_500_chip_set()
    else:
        return None

    existing = {d.value: d for d in denominations}
    result: list[Denomination] = []
    for denom in standard:
        current = existing.get(denom.value)
        if current is not None:
            result.append(current.model_copy(update={"quantity": denom.quantity}))
        else:
            result.append(denom)
    return result


# Built-in sets seeded into the repository when it holds no presets.
PRESET_CHIP_SETS: list[dict] = [
    {
        "name": "Standard",
        "denominations": standard_500_chip_set(),
    },
]
