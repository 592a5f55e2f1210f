from pathlib import Path
from typing import Optional

import pytest

from battery_sqlite._misc import column_type, get_unique_filename, round_half_up
from battery_sqlite._models import TABLES, SqliteInt


def test_get_unique_filename_existing(tmp_path: Path):
    (tmp_path / "data.db").touch()
    (tmp_path / "data(1).db").touch()
    unique = get_unique_filename(str(tmp_path / "data.db"))
    assert unique == str(tmp_path / "data(2).db")


def test_get_unique_filename_no_conflict(tmp_path: Path):
    fname = str(tmp_path / "unique.txt")
    assert get_unique_filename(fname) == fname


@pytest.mark.parametrize("annotation, expected", [
    (int, int),
    (Optional[float], float),
    (Optional[int], int),
    (Optional[SqliteInt], int),
    (str, str),
    (Optional[str], str),
    (list, str),
])
def test_column_type(annotation, expected):
    assert column_type(annotation) is expected


def test_round_half_up():
    assert round_half_up(12.5) == 13
    assert round_half_up(66.666) == 67
    assert round_half_up(33.333) == 33
    assert round_half_up(0) == 0


def test_table_columns():
    assert TABLES["batteryPacks"].columns() == {
        "id": int,
        "name": str,
        "totalCapacityKwh": float,
        "seriesCount": int,
        "parallelCount": int,
        "cellCount": int,
        "cellModelId": int,
    }
    assert list(TABLES["cars"].columns())[0] == "id"


def test_column_name():
    spec = TABLES["carBatteryPacks"]
    assert spec.column_name("car_id") == "carId"
    assert spec.column_name("carId") == "carId"
    assert spec.column_name("id") == "id"
    with pytest.raises(KeyError):
        spec.column_name("brand")
