"""Business-rule checks run on a chip set before it is saved.

Every rule is evaluated so the caller can show all problems at once.
Nothing here raises; the caller decides whether to block the save.
"""

from chipcalc.models.chip_set import ChipSet
from chipcalc.models.distribution import ValidationResult


def validate_chip_set(chip_set: ChipSet) -> ValidationResult:
    """Validate a chip set's name and denominations.

    Rules:
        - the trimmed name is non-empty
        - at least one denomination
        - every value is positive
        - every quantity is at least 1 (zero is only tolerated while editing)
        - no two denominations share a value

    Returns:
        ValidationResult with ``valid`` and the list of error messages.
    """
    errors: list[str] = []

    if not chip_set.name.strip():
        errors.append("name is required")

    if not chip_set.denominations:
        errors.append("need at least one denomination")

    for denom in chip_set.denominations:
        if denom.value <= 0:
            errors.append(f"invalid value: {denom.value}")
        if denom.quantity <= 0:
            errors.append(f"invalid quantity for chip {denom.value}: {denom.quantity}")

    values = [d.value for d in chip_set.denominations]
    if len(values) != len(set(values)):
        errors.append("duplicate values")

    return ValidationResult(valid=not errors, errors=errors)
