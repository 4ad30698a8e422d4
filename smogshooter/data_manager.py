"""Air-quality data loading and the game difficulty derived from it."""

from __future__ import annotations

import math
import re
from enum import Enum
from pathlib import Path

DATA_PATH = "./getPM25/PM25_Tainan.csv"

_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class Difficulty(Enum):
    """Game difficulty, ordered from easiest to hardest."""

    EASY = "easy"
    MEDIUM = "midium"
    HARD = "hard"
    VERY_HARD = "very hard"

    @property
    def label(self) -> str:
        """Text shown to the player for this difficulty."""
        return self.value


def determine_difficulty(pm25: float) -> Difficulty:
    """Map a PM2.5 reading to a difficulty; unusable readings count as easy."""
    if math.isnan(pm25) or pm25 < 0:
        return Difficulty.EASY
    if pm25 < 15.4:
        return Difficulty.EASY
    if pm25 < 35.4:
        return Difficulty.MEDIUM
    if pm25 < 54.4:
        return Difficulty.HARD
    return Difficulty.VERY_HARD


def parse_record(line: str) -> tuple[str, float]:
    """Parse ``year,month,day,pm25`` into a ``year/month/day`` date and a reading.

    Missing fields become empty strings; a reading that cannot be read is 0.0.
    """
    fields = line.rstrip("\r\n").split(",", 3)
    year, month, day = (fields + ["", "", ""])[:3]
    rest = fields[3] if len(fields) > 3 else ""
    match = _FLOAT.match(rest)
    pm25 = float(match.group(1)) if match else 0.0
    return f"{year}/{month}/{day}", pm25


class DataManager:
    """Reads the first record of the PM2.5 data file and rates its difficulty."""

    def __init__(self, path: str | Path = DATA_PATH) -> None:
        with open(path, encoding="utf-8") as handle:
            line = handle.readline()
        self.date, self.pm25 = parse_record(line)
        self._difficulty = determine_difficulty(self.pm25)

    @property
    def difficulty(self) -> Difficulty:
        """Difficulty derived from the loaded reading."""
        return self._difficulty