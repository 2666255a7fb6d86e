"""Void statistics aggregation for Hypixel Bed Wars."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping

MODES: Dict[str, str] = {
    "overall": "Overall",
    "eight_one": "Solo",
    "eight_two": "Doubles",
    "four_three": "Threes",
    "four_four": "Fours",
    "two_four": "4v4",
    "castle": "Castle",
    "rush": "Rush",
    "lucky": "Lucky",
    "swap": "Swappage",
    "ultimate": "Ultimate",
    "voidless": "Voidless",
    "underworld": "Underworld",
}

NORMAL_MODES = ("eight_one", "eight_two", "four_three", "four_four", "two_four", "castle")

# Dream modes are only offered as doubles and fours.
MERGED_MODES = ("rush", "lucky", "swap", "ultimate", "voidless", "underworld")
MERGE_BASES = ("eight_two", "four_four")

KILLS = "void_kills_bedwars"
DEATHS = "void_deaths_bedwars"
FINAL_KILLS = "void_final_kills_bedwars"
FINAL_DEATHS = "void_final_deaths_bedwars"


@dataclass(frozen=True)
class ModeCounters:
    """Void counters of one mode."""

    kills: int = 0
    deaths: int = 0
    final_kills: int = 0
    final_deaths: int = 0

    def __add__(self, other: "ModeCounters") -> "ModeCounters":
        return ModeCounters(
            kills=self.kills + other.kills,
            deaths=self.deaths + other.deaths,
            final_kills=self.final_kills + other.final_kills,
            final_deaths=self.final_deaths + other.final_deaths,
        )


PlayerStats = Dict[str, ModeCounters]


def stat_value(blob: Mapping[str, Any], key: str) -> int:
    """Return ``blob[key]`` as an int, or 0 if missing or not a number."""
    value = blob.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return int(value)


def _counters(blob: Mapping[str, Any], prefix: str) -> ModeCounters:
    return ModeCounters(
        kills=stat_value(blob, prefix + KILLS),
        deaths=stat_value(blob, prefix + DEATHS),
        final_kills=stat_value(blob, prefix + FINAL_KILLS),
        final_deaths=stat_value(blob, prefix + FINAL_DEATHS),
    )


def mode_counters(blob: Mapping[str, Any], key: str) -> ModeCounters:
    """Read the ``{key}_void_*_bedwars`` counters."""
    return _counters(blob, f"{key}_")


def merged_counters(blob: Mapping[str, Any], mode: str) -> ModeCounters:
    """Sum a dream mode's counters across its doubles and fours variants."""
    total = ModeCounters()
    for base in MERGE_BASES:
        total = total + mode_counters(blob, f"{base}_{mode}")
    return total


def aggregate(blob: Mapping[str, Any]) -> PlayerStats:
    """
    Build per-mode void counters from a Bed Wars stats object.

    Never fails: fields missing from ``blob`` count as 0, and every key of
    ``MODES`` is present in the result.
    """
    stats: PlayerStats = {"overall": _counters(blob, "")}
    for mode in NORMAL_MODES:
        stats[mode] = mode_counters(blob, mode)
    for mode in MERGED_MODES:
        stats[mode] = merged_counters(blob, mode)
    return stats
