"""Data loading adapters."""

from .csv_loader import (
    load_csv,
    load_players_csv,
    load_schedule_csv,
    players_from_dataframe,
    schedule_from_dataframe,
)

__all__ = [
    "load_csv",
    "load_players_csv",
    "load_schedule_csv",
    "players_from_dataframe",
    "schedule_from_dataframe",
]
