"""Plain-text rendering of a distribution for copying to the clipboard."""

from chipcalc.models.chip_set import ChipSet
from chipcalc.models.distribution import ChipDistribution, DistributionResult


def _chip_label(dist: ChipDistribution) -> str:
    return dist.name or f"Chip {dist.value}"


def format_for_clipboard(
    result: DistributionResult, player_count: int, chip_set: ChipSet
) -> str:
    """Format a distribution result as a shareable UTF-8 text block."""
    lines = [
        f"🎰 Chip distribution - {chip_set.name}",
        f"👥 {player_count} players",
        "",
        "📊 Per player:",
    ]

    for dist in result.per_player:
        lines.append(
            f"  {dist.count}× {_chip_label(dist)} ({dist.value}) = {dist.count * dist.value}"
        )

    lines.append("")
    lines.append(
        f"💰 Total per player: {result.total_value} points ({result.total_chips} chips)"
    )
    lines.append("")
    lines.append("📦 Table total:")

    for dist in result.table_total:
        lines.append(f"  {dist.count}× {_chip_label(dist)} ({dist.value})")

    lines.append("")
    lines.append(f"🎲 Total chips: {result.total_chips * player_count}")

    if result.warnings:
        lines.append("")
        lines.append("⚠️ Warnings:")
        for warning in result.warnings:
            lines.append(f"  - {warning}")

    return "\n".join(lines)
