"""Pure functions for chip distribution calculations.

No database access, no async. Inputs are read-only denomination lists
and plain ints; outputs are immutable result models. Chip counts,
values and targets are whole numbers and every division floors.
"""

import logging
from functools import reduce
from math import gcd
from typing import Optional

from chipcalc.models.chip_set import Denomination
from chipcalc.models.distribution import (
    ChipDistribution,
    DistributionResult,
    FeasibilityResult,
)
from chipcalc.services.catalogue import active_denominations, total_supply_value

logger = logging.getLogger("chipcalc.services.distribution_math")


# ----------------------------------------------------------------------
# Feasibility
# ----------------------------------------------------------------------

def check_feasibility(
    denominations: list[Denomination],
    target_value_per_player: int,
    player_count: int,
) -> FeasibilityResult:
    """Check whether the set's total value covers ``player_count`` players.

    Only aggregate supply is considered; how the chips would actually be
    split per denomination is the allocator's concern.

    Args:
        denominations: The chip set's denominations.
        target_value_per_player: Points each player should receive.
        player_count: Number of players at the table.

    Returns:
        FeasibilityResult with the maximum supportable player count and,
        when infeasible, a message explaining the shortage.
    """
    if target_value_per_player <= 0:
        return FeasibilityResult(
            feasible=False,
            max_players=0,
            message=(
                f"not enough chips: a target of {target_value_per_player} "
                "points per player supports no players"
            ),
        )

    total_value = total_supply_value(denominations)
    max_players = total_value // target_value_per_player

    if max_players >= player_count:
        return FeasibilityResult(feasible=True, max_players=max_players, message="")

    return FeasibilityResult(
        feasible=False,
        max_players=max_players,
        message=(
            f"not enough chips: at most {max_players} players with "
            f"{target_value_per_player} points each "
            f"(the set holds {total_value} points)"
        ),
    )


# ----------------------------------------------------------------------
# Exact fill search
# ----------------------------------------------------------------------

class _ExactFill:
    """Depth-first search for an exact sum under per-value limits.

    Values are tried largest first and each with its highest count
    first, so the first hit uses the fewest chips the limits allow.
    Dead ``(index, amount)`` states are remembered across calls on the
    same instance. Every remembered amount is at most the largest amount
    searched, so the memo never exceeds ``len(values)`` times that amount;
    callers only search amounts the limits can make up.
    """

    def __init__(self, values: list[int], limits: list[int]) -> None:
        self._values = values
        self._limits = limits
        self._dead: set[tuple[int, int]] = set()

    def find(self, amount: int) -> Optional[list[int]]:
        """Return counts per value summing to ``amount``, or None."""
        counts = [0] * len(self._values)
        if self._search(0, amount, counts):
            return counts
        return None

    def _search(self, index: int, amount: int, counts: list[int]) -> bool:
        if amount == 0:
            return True
        if index >= len(self._values) or (index, amount) in self._dead:
            return False

        value = self._values[index]
        for count in range(min(amount // value, self._limits[index]), -1, -1):
            counts[index] = count
            if self._search(index + 1, amount - count * value, counts):
                return True
        counts[index] = 0
        self._dead.add((index, amount))
        return False


# ----------------------------------------------------------------------
# Allocation passes
# ----------------------------------------------------------------------

def _approach_pass(values: list[int], caps: list[int], target: int) -> list[int]:
    """Greedy fill from the largest value down, never passing the target."""
    counts: list[int] = []
    remaining = target
    for value, cap in zip(values, caps):
        count = min(remaining // value, cap)
        counts.append(count)
        remaining -= count * value
    return counts


def _closest_under_target(
    values: list[int], caps: list[int], target: int, floor_value: int
) -> Optional[list[int]]:
    """Find an allocation worth more than ``floor_value`` and at most ``target``.

    Reachable totals are built once as integer bit sets, one per suffix
    of ``values``, in units of the values' common divisor and clipped at
    the smaller of the target and the capped supply. The highest total
    wins. Counts are read back largest value first, each with the
    highest count that still reaches it.
    """
    ceiling = min(target, sum(v * c for v, c in zip(values, caps)))
    if ceiling <= floor_value:
        return None

    unit = reduce(gcd, values)
    mask = (1 << (ceiling // unit + 1)) - 1

    # reachable[i] has bit k set when k * unit is a sum over values[i:]
    reachable = [1] * (len(values) + 1)
    for i in range(len(values) - 1, -1, -1):
        bits = reachable[i + 1]
        step = values[i] // unit
        left, chunk = caps[i], 1
        while left > 0:
            take = min(chunk, left)
            bits |= (bits << (take * step)) & mask
            left -= take
            chunk *= 2
        reachable[i] = bits

    best = reachable[0].bit_length() - 1
    if best * unit <= floor_value:
        return None

    counts: list[int] = []
    amount = best
    for i, value in enumerate(values):
        step = value // unit
        count = min(amount // step, caps[i])
        while not (reachable[i + 1] >> (amount - count * step)) & 1:
            count -= 1
        counts.append(count)
        amount -= count * step
    return counts


def _diversify_pass(
    values: list[int], caps: list[int], counts: list[int]
) -> list[int]:
    """Break part of a single-denomination stack into smaller chips.

    Runs only when the allocation uses fewer than two denominations.
    The smallest number of large chips whose value can be rebuilt
    exactly from the headroom of smaller denominations is converted.
    Total value is unchanged; returns ``counts`` untouched when no such
    conversion fits within the caps. Conversions worth more than the
    smaller denominations' headroom are never tried.
    """
    used = [i for i, count in enumerate(counts) if count > 0]
    if len(used) != 1:
        return counts

    largest = used[0]
    smaller = [
        i for i in range(largest + 1, len(values))
        if caps[i] - counts[i] > 0
    ]
    if not smaller:
        return counts

    headroom = [caps[i] - counts[i] for i in smaller]
    headroom_value = sum(values[i] * room for i, room in zip(smaller, headroom))
    most = min(counts[largest], headroom_value // values[largest])

    search = _ExactFill([values[i] for i in smaller], headroom)
    for converted in range(1, most + 1):
        fill = search.find(converted * values[largest])
        if fill is None:
            continue
        result = list(counts)
        result[largest] -= converted
        for i, extra in zip(smaller, fill):
            result[i] += extra
        return result

    return counts


# ----------------------------------------------------------------------
# Distribution
# ----------------------------------------------------------------------

def calculate_distribution(
    denominations: list[Denomination],
    target_value_per_player: int,
    player_count: int,
    *,
    diversify: bool = True,
    exact_fallback: bool = False,
) -> DistributionResult:
    """Compute the chips each player receives and the table-wide totals.

    Each denomination contributes at most ``quantity // player_count``
    chips per player so the table never uses more chips than exist.
    The approach pass fills the target greedily from the largest value
    down; the diversification pass then swaps part of a lone stack for
    smaller chips of equal value.

    Callers guarantee ``player_count >= 1`` and
    ``target_value_per_player >= 0``.

    Args:
        denominations: The chip set's denominations, in any order.
        target_value_per_player: Points each player should receive.
        player_count: Number of players at the table.
        diversify: Run the diversification pass.
        exact_fallback: When the greedy pass falls short, search for a
            combination closer to the target before warning.

    Returns:
        DistributionResult. Shortfalls are reported in ``warnings``;
        this function does not raise for well-typed input.
    """
    if not denominations:
        return DistributionResult(warnings=["no denominations defined"])

    usable = sorted(
        active_denominations(denominations), key=lambda d: d.value, reverse=True
    )
    values = [d.value for d in usable]
    caps = [d.quantity // player_count for d in usable]

    counts = _approach_pass(values, caps, target_value_per_player)
    reached = sum(v * c for v, c in zip(values, counts))
    remaining = target_value_per_player - reached

    if remaining > 0 and exact_fallback:
        closer = _closest_under_target(values, caps, target_value_per_player, reached)
        if closer is not None:
            counts = closer
            reached = sum(v * c for v, c in zip(values, counts))
            remaining = target_value_per_player - reached

    if diversify:
        counts = _diversify_pass(values, caps, counts)

    warnings: list[str] = []
    if remaining > 0:
        warnings.append(
            f"only {reached} points reachable per player ({remaining} short)"
        )
    if target_value_per_player > 0:
        feasibility = check_feasibility(
            usable, target_value_per_player, player_count
        )
        if not feasibility.feasible:
            needed = target_value_per_player * player_count
            warnings.append(
                f"not enough chips, you need {needed} points for "
                f"{player_count} players but the set holds "
                f"{total_supply_value(usable)}"
            )

    # Smallest value first, the order chips are usually stacked in
    per_player: list[ChipDistribution] = []
    table_total: list[ChipDistribution] = []
    for denom, count in reversed(list(zip(usable, counts))):
        if count == 0:
            continue
        per_player.append(
            ChipDistribution(
                value=denom.value, count=count, color=denom.color, name=denom.name
            )
        )
        table_total.append(
            ChipDistribution(
                value=denom.value,
                count=count * player_count,
                color=denom.color,
                name=denom.name,
            )
        )

    if warnings:
        logger.debug(
            "Distribution for %d players at %d points: %s",
            player_count, target_value_per_player, "; ".join(warnings),
        )

    return DistributionResult(
        per_player=per_player,
        total_chips=sum(d.count for d in per_player),
        total_value=sum(d.value * d.count for d in per_player),
        table_total=table_total,
        warnings=warnings,
    )
