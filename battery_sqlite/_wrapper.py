from pathlib import Path
from typing import Any, Optional, Union

from ._core import BatteryDataBase
from ._misc import get_unique_filename


class FailSafeDataBase:
    """
    Context manager around an in-memory BatteryDataBase which is kept in the file `dbname`.

    On enter the store is loaded from `dbname`, or seeded if the file does not exist yet.
    A clean exit writes the store back to `dbname`. If an exception leaves the block, `dbname`
    is left untouched and the store is saved to '<dbname>_snapshot.db' instead (counted up as
    '<dbname>_snapshot(1).db' if that exists). The exception is not suppressed.
    """
    _db: Optional[BatteryDataBase]
    dbname: Path
    snapshot_suffix: str

    def __init__(self, dbname: Union[str, Path], snapshot_suffix: str = "_snapshot.db", **kwargs) -> None:
        """
        Args:
            dbname (Union[str, Path]): The database file, '.db' is appended if missing.
            snapshot_suffix (str): Replaces '.db' in the name of snapshot files.
            **kwargs: Passed on to the BatteryDataBase constructor.
        """
        self._db = None
        db_path = Path(dbname)
        if db_path.suffix != ".db":
            db_path = db_path.with_suffix(".db")
        self.dbname = db_path
        self.snapshot_suffix = snapshot_suffix
        self._db_kwargs = kwargs

    def __enter__(self) -> BatteryDataBase:
        if self._db is not None:
            raise RuntimeError('FailSafeDataBase is not reentrant')
        exists = self.dbname.exists()
        self._db = BatteryDataBase(**{"seed": not exists, **self._db_kwargs})
        if exists:
            self._db.load(self.dbname)
        return self._db

    def __exit__(self, exc_type: Optional[type], exc: Optional[BaseException], tb: Optional[Any]) -> bool:
        assert self._db is not None, "Context was not entered"
        db, self._db = self._db, None
        if exc_type is None:
            db.save(self.dbname)
        else:
            db.save(get_unique_filename(f"{self.dbname.with_suffix('')}{self.snapshot_suffix}"))
        return False
