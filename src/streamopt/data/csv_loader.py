"""Build players and schedules from CSV data."""

from pathlib import Path
from typing import List

import numpy as np
import pandas as pd
from loguru import logger

from ..models import Player, Schedule

PLAYER_COLUMNS = ["name", "team", "valid_positions"]
SCHEDULE_COLUMNS = ["week", "day", "team"]


def load_csv(filepath: str) -> pd.DataFrame:
    """Load a CSV file."""
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {filepath}")

    df = pd.read_csv(path)
    logger.info(f"Loaded {len(df)} rows from {filepath}")
    return df


def _require_columns(df: pd.DataFrame, columns: List[str]):
    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def _parse_positions(value, separator: str) -> tuple:
    if isinstance(value, (list, tuple)):
        return tuple(str(pos).strip() for pos in value if str(pos).strip())
    if pd.isna(value):
        return ()
    return tuple(pos.strip() for pos in str(value).split(separator) if pos.strip())


TRUE_FLAGS = {"true", "yes", "y", "1", "t"}
FALSE_FLAGS = {"false", "no", "n", "0", "f", ""}


def _parse_flag(value, name) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, (int, float, np.integer, np.floating)):
        return False if pd.isna(value) else bool(value)
    if value is None:
        return False

    flag = str(value).strip().lower()
    if flag in TRUE_FLAGS:
        return True
    if flag not in FALSE_FLAGS:
        logger.warning(f"Unrecognized injured flag {value!r} for {name}, treating as healthy")
    return False


def players_from_dataframe(df: pd.DataFrame, separator: str = "|") -> List[Player]:
    """
    Convert rows to Player objects.

    Expected columns:
    - name
    - team
    - valid_positions (separator-joined, most restrictive first)
    - avg_points (optional, defaults to 0)
    - injured (optional, defaults to False)

    Rows without a name or without any eligible position are skipped.
    """
    _require_columns(df, PLAYER_COLUMNS)

    players = []
    for _, row in df.iterrows():
        if pd.isna(row["name"]) or not str(row["name"]).strip():
            logger.warning("Skipping row without a player name")
            continue

        positions = _parse_positions(row["valid_positions"], separator)
        if not positions:
            logger.warning(f"Skipping {row['name']}: no eligible positions")
            continue

        avg_points = row.get("avg_points", 0.0)
        injured = row.get("injured", False)
        players.append(Player(
            name=str(row["name"]).strip(),
            team=str(row["team"]).strip().upper(),
            valid_positions=positions,
            avg_points=float(avg_points) if pd.notna(avg_points) else 0.0,
            injured=_parse_flag(injured, row["name"]),
        ))

    return players


def load_players_csv(filepath: str, separator: str = "|") -> List[Player]:
    """Load players from a CSV file."""
    players = players_from_dataframe(load_csv(filepath), separator)
    logger.info(f"Built {len(players)} players from {filepath}")
    return players


def schedule_from_dataframe(df: pd.DataFrame) -> Schedule:
    """
    Build a schedule from one row per (week, day, team) game.

    Expected columns:
    - week
    - day (index within the week)
    - team
    """
    _require_columns(df, SCHEDULE_COLUMNS)

    games = df[SCHEDULE_COLUMNS].dropna()
    dropped = len(df) - len(games)
    if dropped:
        logger.warning(f"Skipping {dropped} schedule rows with missing values")

    return Schedule.from_entries(
        (int(row.week), int(row.day), str(row.team)) for row in games.itertuples(index=False)
    )


def load_schedule_csv(filepath: str) -> Schedule:
    """Load a game schedule from a CSV file."""
    return schedule_from_dataframe(load_csv(filepath))
