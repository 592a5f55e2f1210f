from ._core import BatteryDataBase, CarBatteryPackTable, Table
from ._errors import (BatteryDataBaseError, ConflictError, NotFoundError,
                      ValidationError)
from ._models import (BATTERY_PACKS, CAR_BATTERY_PACKS, CARS, CELL_MODELS,
                      BatteryPack, BatteryPackFields, BatteryPackPatch, Car,
                      CarBatteryPack, CarBatteryPackFields,
                      CarBatteryPackPatch, CarFields, CarPatch, CellModel,
                      CellModelFields, CellModelPatch)
from ._quality import (Completeness, TableStats, check_battery_pack, check_car,
                       check_cell_model, table_stats)
from ._wrapper import FailSafeDataBase

__all__ = [
    "BatteryDataBase",
    "Table",
    "CarBatteryPackTable",
    "FailSafeDataBase",
    "BatteryDataBaseError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "CELL_MODELS",
    "BATTERY_PACKS",
    "CARS",
    "CAR_BATTERY_PACKS",
    "CellModel",
    "CellModelFields",
    "CellModelPatch",
    "BatteryPack",
    "BatteryPackFields",
    "BatteryPackPatch",
    "Car",
    "CarFields",
    "CarPatch",
    "CarBatteryPack",
    "CarBatteryPackFields",
    "CarBatteryPackPatch",
    "Completeness",
    "TableStats",
    "check_cell_model",
    "check_battery_pack",
    "check_car",
    "table_stats",
]
