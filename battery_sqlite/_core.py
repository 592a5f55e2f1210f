import logging
import os
import sqlite3
import tempfile
from pathlib import Path
from shutil import copyfile
from typing import Any, Dict, Generator, List, Mapping, Optional, Tuple, Type, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlite_utils import Database as _Database

from . import _seed
from ._errors import ConflictError, NotFoundError, ValidationError
from ._models import (BATTERY_PACKS, CAR_BATTERY_PACKS, CARS, CELL_MODELS,
                      EXPORT_ORDER, TABLES, BatteryPack, Car, TableSpec)

Fields = Union[BaseModel, Mapping[str, Any], None]


class Table:
    """
    CRUD access to a single table of a BatteryDataBase.

    Records are read and returned as instances of the table's pydantic model. Every write
    checks the foreign keys of the table against the referenced tables, and `remove`
    refuses to delete a record which is still referenced by another table.

    Attributes:
        spec (TableSpec): Metadata of the table (name, models, foreign keys).
    """

    spec: TableSpec

    def __init__(self, database: "BatteryDataBase", spec: TableSpec) -> None:
        self._database = database
        self.spec = spec

    def __call__(self, **kwargs) -> Generator[BaseModel, None, None]:
        """
        Yields every record in the table. They can be filtered by passing **kwargs.

        Args:
            kwargs: Additional arguments passed to `rows_where` (e.g., where, where_args, order_by, limit, offset).

        Yields:
            BaseModel: Records of the table, in storage order unless `order_by` is given.
        """
        for row in self._table.rows_where(**kwargs):
            yield self.spec.record_cls.model_validate(row)

    def __len__(self) -> int:
        return self._table.count

    def __repr__(self) -> str:
        return f"<Table {self.name}>"

    @property
    def name(self) -> str:
        return self.spec.table

    @property
    def _table(self):
        return self._database._db[self.spec.table]

    def list(self) -> List[BaseModel]:
        """
        Returns all records of the table in storage order.
        """
        return list(self())

    def get(self, id: int) -> Optional[BaseModel]:
        """
        Retrieve a record by its id.

        Args:
            id (int): The id of the record.

        Returns:
            BaseModel | None: The record, or None if no record has this id.
        """
        entries = list(self(where="id = ?", where_args=[id]))
        return entries[0] if entries else None

    def exists(self, id: int) -> bool:
        return self._table.count_where("id = ?", [id]) > 0

    def where(self, **fields: Any) -> List[BaseModel]:
        """
        Returns the records whose columns equal all of the given values.
        Field names can be given as attribute name or as column name (e.g. `car_id` or `carId`).

        Raises:
            KeyError: If a field name is not a column of the table.
        """
        clauses, args = [], []
        for name, value in fields.items():
            column = self.spec.column_name(name)
            if value is None:
                clauses.append(f"[{column}] is null")
            else:
                clauses.append(f"[{column}] = ?")
                args.append(value)
        return list(self(where=" and ".join(clauses) or None, where_args=args or None))

    def create(self, fields: Fields = None, **kwargs: Any) -> BaseModel:
        """
        Insert a new record and return it.

        Omitted text fields default to an empty string, omitted numbers and foreign keys to None.
        The id is one more than the highest id in the table, or 1 if the table is empty.

        Args:
            fields (BaseModel | Mapping | None): The values of the new record. Keys can be attribute
                names or column names.
            **kwargs: Further values, they take precedence over `fields`.

        Raises:
            ValidationError: If a value has the wrong type, or a foreign key points to a missing record.
        """
        data = self._parse(self.spec.fields_cls, fields, kwargs)
        values = data.model_dump(by_alias=True, exclude={"id"})
        self._check_references(values)

        record = self._validate(self.spec.record_cls, {"id": self._next_id(), **values})
        self._table.insert(record.model_dump(by_alias=True))
        return record

    def update(self, id: int, patch: Fields = None, **kwargs: Any) -> BaseModel:
        """
        Change the fields of an existing record and return the updated record.

        Only the fields which are explicitly given are changed, every other field keeps its value.
        Passing None for a field clears it.

        Args:
            id (int): The id of the record.
            patch (BaseModel | Mapping | None): The values to change. A patch model only contributes
                the fields which were set on it.
            **kwargs: Further values, they take precedence over `patch`.

        Raises:
            NotFoundError: If no record has this id.
            ValidationError: If a value has the wrong type, a required field is cleared,
                or a foreign key points to a missing record.
        """
        changes = self._parse(self.spec.patch_cls, patch, kwargs).model_dump(exclude_unset=True, by_alias=True)

        current = self.get(id)
        if current is None:
            raise NotFoundError(f"{self.spec.label} not found")
        self._check_references(changes)

        record = self._validate(self.spec.record_cls, {**current.model_dump(by_alias=True), **changes})
        if changes:
            row = record.model_dump(by_alias=True)
            self._table.update(current.id, {column: row[column] for column in changes})
        return record

    def remove(self, id: int) -> bool:
        """
        Delete a record.

        Raises:
            NotFoundError: If no record has this id.
            ConflictError: If a record of another table still references this record.
        """
        if not self.exists(id):
            raise NotFoundError(f"{self.spec.label} not found")

        for spec, column in self._database._references_to(self.name):
            if self._database._db[spec.table].count_where(f"[{column}] = ?", [id]):
                msg = f"Cannot delete {self.spec.label.lower()}: it is referenced by {spec.plural}"
                raise ConflictError(msg)

        self._table.delete(id)
        return True

    def _next_id(self) -> int:
        current = self._database._db.execute(f"select max([id]) from [{self.name}]").fetchone()[0]
        return (current or 0) + 1

    def _check_references(self, values: Mapping[str, Any]) -> None:
        """
        Checks every foreign key in `values` (keyed by column name) which is not None.
        Foreign keys missing in `values` are not checked.
        """
        for column, other_table in self.spec.foreign_keys.items():
            value = values.get(column)
            if value is not None and not self._database[other_table].exists(value):
                raise ValidationError(f"Invalid {column}: {TABLES[other_table].label.lower()} does not exist")

    def _parse(self, model_cls: Type[BaseModel], fields: Fields, kwargs: Dict[str, Any]) -> BaseModel:
        # records subclass the create models, they must not pass their id on
        if type(fields) is model_cls and not kwargs:
            return fields

        data: Dict[str, Any] = {}
        if isinstance(fields, BaseModel):
            data.update(fields.model_dump(exclude_unset=True, exclude={"id"}))
        elif fields is not None:
            data.update(fields)
        data.update(kwargs)
        return self._validate(model_cls, data)

    def _validate(self, model_cls: Type[BaseModel], data: Mapping[str, Any]) -> BaseModel:
        try:
            return model_cls.model_validate(data)
        except PydanticValidationError as exc:
            raise ValidationError(f"Invalid {self.spec.label.lower()}: {exc}") from exc


class CarBatteryPackTable(Table):
    """
    The junction table between cars and battery packs, with lookups from either side.
    """

    def by_car(self, car_id: int) -> List[BaseModel]:
        return self.where(car_id=car_id)

    def by_battery_pack(self, battery_pack_id: int) -> List[BaseModel]:
        return self.where(battery_pack_id=battery_pack_id)

    def battery_packs_for_car(self, car_id: int) -> List[BatteryPack]:
        packs = self._database.battery_packs
        found = (packs.get(relation.battery_pack_id) for relation in self.by_car(car_id))
        return [pack for pack in found if pack is not None]

    def cars_for_battery_pack(self, battery_pack_id: int) -> List[Car]:
        cars = self._database.cars
        found = (cars.get(relation.car_id) for relation in self.by_battery_pack(battery_pack_id))
        return [car for car in found if car is not None]


class BatteryDataBase:
    """
    Relational store for battery cell models, battery packs, cars and their relations, backed by SQLite.

    Each table is persisted as a SQLite table of the same name (cellModels, batteryPacks, cars,
    carBatteryPacks). A store which finds no 'cellModels' table on construction is considered new:
    the tables are created and filled with the built-in dataset.

    The database can be in-memory or file-based. A file-based store keeps its data across instances,
    either kind can be written to another file with `save` and restored with `load`.

    Attributes:
        _db (_Database): The underlying SQLite database instance.
        _tables (Dict[str, Table]): Mapping of tablenames to their Table.
    """
    _db: _Database
    _tables: Dict[str, Table]

    def __init__(
        self,
        filename_or_conn: Union[str, Path, sqlite3.Connection, None] = None,
        seed: bool = True,
        **kwargs,
    ) -> None:
        """
        Initialize the store. If no filename or connection is provided, creates an in-memory database.

        Args:
            filename_or_conn (Union[str, Path, sqlite3.Connection, None], optional):
                The filename, Path, or sqlite3.Connection to use for the database. If None, uses in-memory DB.
            seed (bool): Fill a new database with the built-in dataset. Defaults to True.
            **kwargs: Additional keyword arguments passed to sqlite_utils.Database.
        """
        if filename_or_conn is None:
            self._db = _Database(memory=True, **kwargs)
        else:
            self._db = _Database(filename_or_conn, **kwargs)

        self._tables = {
            name: (CarBatteryPackTable if name == CAR_BATTERY_PACKS else Table)(self, spec)
            for name, spec in TABLES.items()
        }

        is_new = CELL_MODELS not in self._db.table_names()
        _create_tables(self._db)
        if is_new and seed:
            self._load_initial_data()

    def __getitem__(self, tablename: str) -> Table:
        try:
            return self._tables[tablename]
        except KeyError:
            raise KeyError(f"Can't find table '{tablename}' in Database") from None

    def __call__(self, tablename: str, **kwargs) -> Generator[BaseModel, None, None]:
        """
        Yields every record in the table. They can be filterd by passing **kwargs.

        Args:
            tablename (str): Name of the table.
            kwargs: Additional arguments passed to `rows_where` (e.g., where, where_args, order_by, limit, offset).
        """
        yield from self[tablename](**kwargs)

    @property
    def cell_models(self) -> Table:
        return self._tables[CELL_MODELS]

    @property
    def battery_packs(self) -> Table:
        return self._tables[BATTERY_PACKS]

    @property
    def cars(self) -> Table:
        return self._tables[CARS]

    @property
    def car_battery_packs(self) -> CarBatteryPackTable:
        return self._tables[CAR_BATTERY_PACKS]

    @property
    def filename(self) -> str:
        """
        Returns the filename of the database, or ':memory:' if in-memory.
        """
        db_filename = self._db.conn.execute("PRAGMA database_list").fetchone()[2]
        if db_filename in {"", ":memory:"}:
            return ":memory:"
        else:
            return db_filename

    def reset(self) -> None:
        """
        Drops every table and fills the store with the built-in dataset again.
        """
        logging.info("Resetting database")
        _drop_tables(self._db)
        _create_tables(self._db)
        self._load_initial_data()

    def export(self) -> Dict[str, List[Dict[str, Any]]]:
        """
        Returns a snapshot of all tables, mapping each tablename to its rows (column names as keys, `id` first).
        """
        return {name: [_to_row(record) for record in self[name].list()] for name in EXPORT_ORDER}

    def load(self, filename: Union[str, Path]) -> None:
        """
        Replaces the tables of the store with the tables stored in the given file.
        Tables the file does not contain are left empty, the built-in dataset is not loaded.

        Args:
            filename (Union[str, Path]): The path to the file to load.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValidationError: If a row of the file does not fit its table.
        """
        filename = str(filename)
        if not os.path.isfile(filename):
            raise FileNotFoundError(f"Can not load {filename}")

        source = _Database(filename)
        try:
            data = {name: _read_rows(source, name) for name in TABLES}
        finally:
            source.conn.close()
        _write_tables(self._db, data)

    def save(self, filename: Union[str, Path], backup: bool = True, backup_suffix: str = ".backup") -> None:
        """
        Write the four tables of the store to a file.

        The tables are written to a temporary file first, which is then copied to `filename`.
        If the file already exists it is backed up with `backup_suffix` next to the temporary file.
        When writing fails, the location of the backup is logged and the error is raised again.
        Saving a file-based store onto its own file only logs a warning.

        Args:
            filename (Union[str, Path]): The target file, '.db' is appended if missing.
            backup (bool): Back up an existing file before overwriting it. Default is True.
            backup_suffix (str): Suffix for the backup file. Default is '.backup'.
        """
        filename = str(filename)
        if not filename.endswith(".db"):
            filename += ".db"
        if self.filename != ":memory:" and os.path.exists(filename) and os.path.samefile(self.filename, filename):
            logging.warning(f"database is persistent, already stored in a file: {self.filename}")
            return

        tmp_name = os.path.join(tempfile.mkdtemp(), os.path.basename(filename))
        backup_file = tmp_name + backup_suffix

        if os.path.isfile(filename) and backup:
            copyfile(filename, backup_file)
        try:
            target = _Database(tmp_name)
            _write_tables(target, self.export())
            target.conn.close()
            copyfile(tmp_name, filename)
        except Exception:
            if backup:
                logging.warning(f"saved the backup file under '{backup_file}'")
            raise

    def close(self) -> None:
        self._db.conn.close()

    def _references_to(self, tablename: str) -> List[Tuple[TableSpec, str]]:
        """
        Returns (table, column) for every foreign key column which references `tablename`.
        """
        return [
            (spec, column)
            for spec in TABLES.values()
            for column, other_table in spec.foreign_keys.items()
            if other_table == tablename
        ]

    def _load_initial_data(self) -> None:
        logging.info("Loading initial data into database...")
        initial_data = [
            (CELL_MODELS, _seed.CELL_MODELS),
            (CARS, _seed.CARS),
            (BATTERY_PACKS, _seed.BATTERY_PACKS),
            (CAR_BATTERY_PACKS, _seed.CAR_BATTERY_PACKS),
        ]
        for tablename, rows in initial_data:
            table = self[tablename]
            for row in rows:
                table.create(row)
        logging.info("Initial data loaded successfully")


def _to_row(record: BaseModel) -> Dict[str, Any]:
    return {"id": record.id, **record.model_dump(by_alias=True, exclude={"id"})}


def _create_tables(db: _Database) -> None:
    for spec in TABLES.values():
        db[spec.table].create(
            spec.columns(),
            pk="id",
            foreign_keys=spec.foreign_key_tuples(),
            if_not_exists=True,
        )


def _drop_tables(db: _Database) -> None:
    for name in reversed(list(TABLES)):
        db[name].drop(ignore=True)


def _read_rows(db: _Database, tablename: str) -> List[Dict[str, Any]]:
    """
    Reads and validates the rows of one table of `db`. A missing table has no rows.
    """
    spec = TABLES[tablename]
    if not db[tablename].exists():
        return []
    try:
        return [_to_row(spec.record_cls.model_validate(row)) for row in db[tablename].rows]
    except PydanticValidationError as exc:
        raise ValidationError(f"Invalid {spec.label.lower()} in '{tablename}': {exc}") from exc


def _write_tables(db: _Database, data: Mapping[str, List[Dict[str, Any]]]) -> None:
    """
    Replaces the tables of `db` with the rows in `data`, keyed by tablename.
    """
    _drop_tables(db)
    _create_tables(db)
    for name in TABLES:
        rows = data.get(name)
        if rows:
            db[name].insert_all(rows)
