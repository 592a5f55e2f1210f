import pytest

from battery_sqlite import BatteryDataBase


@pytest.fixture()
def db() -> BatteryDataBase:
    return BatteryDataBase()


@pytest.fixture()
def empty_db() -> BatteryDataBase:
    db = BatteryDataBase(seed=False)
    assert all(len(db[name]) == 0 for name in db.export())
    return db
