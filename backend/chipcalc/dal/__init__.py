"""Data Access Layer -- MongoDB repository classes and connection management."""

from chipcalc.dal.database import (
    connect_to_mongo,
    close_mongo_connection,
    ensure_indexes,
    get_database,
)
from chipcalc.dal.chip_sets_dal import ChipSetDAL

__all__ = [
    # Connection management
    "connect_to_mongo",
    "close_mongo_connection",
    "ensure_indexes",
    "get_database",
    # DAL classes
    "ChipSetDAL",
]
