from typing import Annotated, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ._misc import column_type

CELL_MODELS = "cellModels"
BATTERY_PACKS = "batteryPacks"
CARS = "cars"
CAR_BATTERY_PACKS = "carBatteryPacks"


# SQLite stores integers as signed 64 bit
SqliteInt = Annotated[int, Field(ge=-2**63, lt=2**63)]


class _Fields(BaseModel):
    # columns are stored and exported in camelCase, input may use either spelling
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CellModelFields(_Fields):
    manufacturer: str = ""
    model: str = ""
    chemistry: str = ""
    nominal_voltage: Optional[float] = None
    nominal_capacity_mah: Optional[SqliteInt] = None


class CellModel(CellModelFields):
    id: int


class CellModelPatch(_Fields):
    manufacturer: Optional[str] = None
    model: Optional[str] = None
    chemistry: Optional[str] = None
    nominal_voltage: Optional[float] = None
    nominal_capacity_mah: Optional[SqliteInt] = None


class BatteryPackFields(_Fields):
    name: str = ""
    total_capacity_kwh: Optional[float] = None
    series_count: Optional[SqliteInt] = None
    parallel_count: Optional[SqliteInt] = None
    cell_count: Optional[SqliteInt] = None
    cell_model_id: Optional[SqliteInt] = None


class BatteryPack(BatteryPackFields):
    id: int


class BatteryPackPatch(_Fields):
    name: Optional[str] = None
    total_capacity_kwh: Optional[float] = None
    series_count: Optional[SqliteInt] = None
    parallel_count: Optional[SqliteInt] = None
    cell_count: Optional[SqliteInt] = None
    cell_model_id: Optional[SqliteInt] = None


class CarFields(_Fields):
    brand: str = ""
    model: str = ""
    trim: Optional[str] = None
    year_start: Optional[SqliteInt] = None
    year_end: Optional[SqliteInt] = None


class Car(CarFields):
    id: int


class CarPatch(_Fields):
    brand: Optional[str] = None
    model: Optional[str] = None
    trim: Optional[str] = None
    year_start: Optional[SqliteInt] = None
    year_end: Optional[SqliteInt] = None


class CarBatteryPackFields(_Fields):
    car_id: Optional[SqliteInt] = None
    battery_pack_id: Optional[SqliteInt] = None


class CarBatteryPack(CarBatteryPackFields):
    id: int


class CarBatteryPackPatch(_Fields):
    car_id: Optional[SqliteInt] = None
    battery_pack_id: Optional[SqliteInt] = None


class TableSpec:
    """
    Stores metadata about a table and the pydantic models used to read and write it.

    Attributes:
        table (str): The name of the table, also used as key in exports.
        record_cls (Type[BaseModel]): Model of a stored row, including its id.
        fields_cls (Type[BaseModel]): Model of the input accepted by `create`.
        patch_cls (Type[BaseModel]): Model of the input accepted by `update`.
        foreign_keys (Dict[str, str]): Mapping of column name to the referenced table.
        label (str): Singular name used in error messages, e.g. 'Cell model'.
        plural (str): Plural name used in error messages, e.g. 'battery packs'.
    """

    table: str
    record_cls: Type[BaseModel]
    fields_cls: Type[BaseModel]
    patch_cls: Type[BaseModel]
    foreign_keys: Dict[str, str]
    label: str
    plural: str

    def __init__(
        self,
        table: str,
        record_cls: Type[BaseModel],
        fields_cls: Type[BaseModel],
        patch_cls: Type[BaseModel],
        label: str,
        plural: str,
        foreign_keys: Optional[Dict[str, str]] = None,
    ) -> None:
        self.table = table
        self.record_cls = record_cls
        self.fields_cls = fields_cls
        self.patch_cls = patch_cls
        self.label = label
        self.plural = plural
        self.foreign_keys = dict(foreign_keys or {})

    def columns(self) -> Dict[str, type]:
        """
        Return the column definition for sqlite-utils, `id` first.
        """
        columns = {"id": int}
        for field_name, field_info in self.fields_cls.model_fields.items():
            columns[field_info.alias or field_name] = column_type(field_info.annotation)
        return columns

    def column_name(self, name: str) -> str:
        """
        Resolve an attribute name (snake_case or camelCase) to its stored column name.
        Raises KeyError for unknown names.
        """
        if name == "id":
            return name
        for field_name, field_info in self.fields_cls.model_fields.items():
            if name in (field_name, field_info.alias):
                return field_info.alias or field_name
        raise KeyError(f"'{self.table}' has no column '{name}'")

    def foreign_key_tuples(self) -> List[tuple]:
        return [(column, other, "id") for column, other in self.foreign_keys.items()]


# ordered by dependency, a table only references tables listed before it
TABLES: Dict[str, TableSpec] = {
    CELL_MODELS: TableSpec(
        table=CELL_MODELS,
        record_cls=CellModel,
        fields_cls=CellModelFields,
        patch_cls=CellModelPatch,
        label="Cell model",
        plural="cell models",
    ),
    CARS: TableSpec(
        table=CARS,
        record_cls=Car,
        fields_cls=CarFields,
        patch_cls=CarPatch,
        label="Car",
        plural="cars",
    ),
    BATTERY_PACKS: TableSpec(
        table=BATTERY_PACKS,
        record_cls=BatteryPack,
        fields_cls=BatteryPackFields,
        patch_cls=BatteryPackPatch,
        label="Battery pack",
        plural="battery packs",
        foreign_keys={"cellModelId": CELL_MODELS},
    ),
    CAR_BATTERY_PACKS: TableSpec(
        table=CAR_BATTERY_PACKS,
        record_cls=CarBatteryPack,
        fields_cls=CarBatteryPackFields,
        patch_cls=CarBatteryPackPatch,
        label="Relation",
        plural="car-battery relations",
        foreign_keys={"carId": CARS, "batteryPackId": BATTERY_PACKS},
    ),
}

EXPORT_ORDER = [CELL_MODELS, BATTERY_PACKS, CARS, CAR_BATTERY_PACKS]
