"""
Completeness checks for the records of the store.

A record is complete when every attribute which is optional in the schema, but needed
for a useful dataset, is filled. Empty strings, None and 0 count as missing.
"""
from typing import Callable, Dict, List, Optional

from pydantic import BaseModel

from ._core import Table
from ._misc import round_half_up
from ._models import (BATTERY_PACKS, CARS, CELL_MODELS, BatteryPack, Car,
                      CellModel)


class Completeness(BaseModel):
    is_complete: bool
    issues: List[str]
    completeness: int


class TableStats(BaseModel):
    total: int
    complete: int
    incomplete: int
    percentage: int


def _completeness(issues: List[str], checked: int) -> Completeness:
    return Completeness(
        is_complete=not issues,
        issues=issues,
        completeness=round_half_up((checked - len(issues)) / checked * 100),
    )


def check_cell_model(cell: CellModel) -> Completeness:
    issues = []
    if not cell.chemistry:
        issues.append("Missing chemistry")
    if not cell.nominal_voltage:
        issues.append("Missing voltage")
    if not cell.nominal_capacity_mah:
        issues.append("Missing capacity")
    return _completeness(issues, 3)


def check_battery_pack(pack: BatteryPack) -> Completeness:
    issues = []
    if not pack.cell_model_id:
        issues.append("Missing cell model")
    if not pack.series_count:
        issues.append("Missing series count")
    if not pack.parallel_count:
        issues.append("Missing parallel count")
    if not pack.cell_count:
        issues.append("Missing cell count")
    return _completeness(issues, 4)


def check_car(car: Car) -> Completeness:
    """
    The trim is optional, only the production years are checked.
    Having exactly one of both years counts as half complete.
    """
    issues = []
    if not car.year_start:
        issues.append("Missing start year")
    if not car.year_end:
        issues.append("Missing end year")
    return Completeness(
        is_complete=not issues,
        issues=issues,
        completeness={0: 100, 1: 50}.get(len(issues), 0),
    )


CHECKS: Dict[str, Callable[[BaseModel], Completeness]] = {
    CELL_MODELS: check_cell_model,
    BATTERY_PACKS: check_battery_pack,
    CARS: check_car,
}


def table_stats(table: Table) -> Optional[TableStats]:
    """
    Count the complete and incomplete records of a table.

    Args:
        table (Table): A table of a BatteryDataBase.

    Returns:
        TableStats | None: The counts, or None for tables without completeness check (the relations).
    """
    check = CHECKS.get(table.name)
    if check is None:
        return None

    records = table.list()
    total = len(records)
    complete = sum(1 for record in records if check(record).is_complete)
    return TableStats(
        total=total,
        complete=complete,
        incomplete=total - complete,
        percentage=round_half_up(complete / total * 100) if total else 0,
    )
