"""City stage art: an ASCII skyline that grows with the player's total XP."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CityStage:
    """One skyline stage unlocked at a minimum total XP."""

    min_xp: int
    label: str
    art: tuple[str, ...]


CITY_STAGES: tuple[CityStage, ...] = (
    CityStage(0, "Empty lot", (
        "",
        "",
        "",
        "          .---.",
        "         (     )",
        "          `---'",
        "______________________________",
        "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~",
    )),
    CityStage(1, "Campfire town", (
        "",
        "        _         _",
        "       | |  _    | |",
        "   _   | | | |   | |   _",
        "  | |__| |_| |___| |__| |",
        "__|____|_____|___|_____|_____",
        "______________________________",
        "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~",
    )),
    CityStage(25, "Small city", (
        "             _   ___",
        "    _       | | |[] |   _",
        "   | |  _   | | |   |  | |",
        "   | | | |  | |_|   |  | |",
        "   | |_| |__|___|___|__| |",
        "__|___|_____|___|___|____|___",
        "______________________________",
        "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~",
    )),
    CityStage(60, "Growing skyline", (
        "          ___       ____",
        "   __    |[] |  _  |[]  |",
        "  |  |   |   | | | |    |  _",
        "  |[]| __|   |_| |_| [] | | |",
        "  |  ||__|___|___|_|____|_| |",
        "__|__|_____|___|_____|___|_|__",
        "______________________________",
        "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~",
    )),
    CityStage(110, "Busy downtown", (
        "     ____   ___    _____",
        "  __|[]  | |[] |  |[] []| __",
        " |  |    | |   |  |     ||  |",
        " |[]| [] | |[] |__| []  ||[]|",
        " |  |____|_|___|__|_____| |  |",
        "_|__|_____|___|__|___|___|_|__",
        "______________________________",
        "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~",
    )),
    CityStage(180, "Metropolis", (
        "  ____  _____  ____  _____",
        " |[]  ||[] []||[]  ||[] []|",
        " |    ||     ||    ||     |",
        " | [] || []  || [] || []  | __",
        " |____||_____| |____||____||[]",
        "_|____|_|____|_|____|_|____|__",
        "______________________________",
        "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~",
    )),
)


def stage_for_xp(total_xp: float) -> int:
    """Index of the highest stage whose threshold the XP has reached."""
    for index in range(len(CITY_STAGES) - 1, -1, -1):
        if total_xp >= CITY_STAGES[index].min_xp:
            return index
    return 0


def normalize_art(art: tuple[str, ...]) -> str:
    """Right-pad every line to the widest one and join them."""
    width = max((len(line) for line in art), default=0)
    return "\n".join(line.ljust(width) for line in art)


def stored_total_xp(fields: dict[str, Any]) -> float:
    """Total XP from stored fields, falling back to the current bar's XP."""
    for key in ("totalXp", "xp"):
        value = fields.get(key)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return value
    return 0


def render_stage(total_xp: float) -> dict[str, Any]:
    """Art and captions for the stage reached at this XP."""
    index = stage_for_xp(total_xp)
    stage = CITY_STAGES[index]
    return {
        "stage": index,
        "label": stage.label,
        "art": normalize_art(stage.art),
        "caption": f"Stage {index} - {stage.label}",
        "xp_caption": f"Total XP: {total_xp:g}",
    }
