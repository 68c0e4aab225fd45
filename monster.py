"""
monster.py  ––  monster record, attribute table and stat-block text
-------------------------------------------------------------------
A MonsterRecord starts empty and is filled while the page is walked:

    name          from the page title
    description   from render_html.render_html
    everything    from (label, value) pairs via apply_attribute
    else

format_statblock turns the finished record into the final text block.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

SENSES_PREFIX = "passive Perception "


# ---------- record -----------------------------------------------------------
@dataclass
class MonsterRecord:
    name        : str = ""
    description : str = ""

    size        : str = ""
    type        : str = ""
    alignment   : str = ""

    ac          : str = ""
    hp          : str = ""
    speed       : str = ""

    strength    : str = ""
    dexterity   : str = ""
    constitution: str = ""
    intelligence: str = ""
    wisdom      : str = ""
    charisma    : str = ""

    skills      : str = ""
    saves       : str = ""
    senses      : str = ""
    languages   : str = ""
    challenge   : str = ""
    proficiency : str = ""

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


# ---------- attribute table --------------------------------------------------
# page label -> (record field, value prefix); labels match exactly
ATTRIBUTE_FIELDS: dict[str, tuple[str, str]] = {
    "Size"              : ("size",         ""),
    "Type"              : ("type",         ""),
    "Alignment"         : ("alignment",    ""),
    "AC"                : ("ac",           ""),
    "HP"                : ("hp",           ""),
    "Speed"             : ("speed",        ""),
    "STR"               : ("strength",     ""),
    "DEX"               : ("dexterity",    ""),
    "CON"               : ("constitution", ""),
    "INT"               : ("intelligence", ""),
    "WIS"               : ("wisdom",       ""),
    "CHA"               : ("charisma",     ""),
    "Skills"            : ("skills",       ""),
    "Saving Throws"     : ("saves",        ""),
    "Passive Perception": ("senses",       SENSES_PREFIX),
    "Languages"         : ("languages",    ""),
    "Challenge Rating"  : ("challenge",    ""),
    "Proficiency"       : ("proficiency",  ""),
}


def apply_attribute(record: MonsterRecord, label: str, value: str) -> bool:
    """Store one attribute pair on *record*.

    Unknown labels are ignored and leave the record untouched.  A label
    seen twice keeps the later value.  Returns True if a field was set.
    """
    label, value = label.strip(), value.strip()
    target = ATTRIBUTE_FIELDS.get(label)
    if target is None:
        logger.debug("ignoring attribute %r", label)
        return False
    field, prefix = target
    setattr(record, field, prefix + value)
    return True


def collect_attributes(
    pairs: Iterable[tuple[str, str]],
    record: Optional[MonsterRecord] = None,
) -> MonsterRecord:
    record = record if record is not None else MonsterRecord()
    for label, value in pairs:
        apply_attribute(record, label, value)
    return record


# ---------- stat block -------------------------------------------------------
# fenced block rows, in output order
STAT_LINES = (
    ("Armor Class", "ac"),
    ("Hit Points",  "hp"),
    ("Speed",       "speed"),
    ("STR",         "strength"),
    ("DEX",         "dexterity"),
    ("CON",         "constitution"),
    ("INT",         "intelligence"),
    ("WIS",         "wisdom"),
    ("CHA",         "charisma"),
)

# emitted only when non-empty
OPTIONAL_LINES = (
    ("Skills",    "skills"),
    ("Senses",    "senses"),
    ("Languages", "languages"),
)

FENCE = "```"


def format_statblock(m: MonsterRecord) -> str:
    """Render the record as description + stats.  No trailing newline."""
    parts = [m.description, "\n\n", "# Stats\n"]
    parts.append(f"{m.size} {m.type} {m.alignment}")

    parts.append(f"\n{FENCE}\n")
    for label, field in STAT_LINES:
        parts.append(f"{label} {getattr(m, field)}\n")
    parts.append(f"{FENCE}\n")

    for label, field in OPTIONAL_LINES:
        value = getattr(m, field)
        if value:
            parts.append(f"*{label}* {value}\n")

    parts.append(f"*Challenge* {m.challenge}")
    return "".join(parts)
