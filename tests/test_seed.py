import logging

import pytest

from battery_sqlite import BatteryDataBase, CellModel

from ._helper import (BATTERY_PACK_COUNT, CAR_COUNT, CELL_MODEL_COUNT,
                      RELATION_COUNT, SEED_COUNTS)


def test_seed_counts(db: BatteryDataBase):
    assert len(db.cell_models) == CELL_MODEL_COUNT
    assert len(db.cars) == CAR_COUNT
    assert len(db.battery_packs) == BATTERY_PACK_COUNT
    assert len(db.car_battery_packs) == RELATION_COUNT


def test_seed_ids_are_sequential(db: BatteryDataBase):
    for name, count in SEED_COUNTS.items():
        assert [record.id for record in db[name].list()] == list(range(1, count + 1))


def test_seed_content(db: BatteryDataBase):
    assert db.cell_models.get(1) == CellModel(
        id=1,
        manufacturer="Shenzhen Starax Energy Technology",
        model="S28(B28)",
        chemistry="Li-ION",
        nominal_voltage=3.63,
        nominal_capacity_mah=55000,
    )
    assert db.cell_models.get(4).nominal_capacity_mah is None

    pack = db.battery_packs.get(1)
    assert pack.name == "BMW i3 21.6kWh (Samsung 60Ah)"
    assert db.cell_models.get(pack.cell_model_id).model == "Prismatic 60Ah"

    car = db.cars.get(28)
    assert (car.brand, car.model, car.year_start, car.year_end) == ("Toyota", "Prius PHEV", 2016, 2022)


def test_seed_is_logged(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.INFO):
        BatteryDataBase()
    assert [r.message for r in caplog.records if r.name == "root"] == [
        "Loading initial data into database...",
        "Initial data loaded successfully",
    ]


def test_no_seed():
    db = BatteryDataBase(seed=False)
    assert db.export() == {name: [] for name in ["cellModels", "batteryPacks", "cars", "carBatteryPacks"]}


def test_reset_restores_seed(db: BatteryDataBase):
    db.cars.create(brand="Tesla", model="Model Y")
    db.car_battery_packs.remove(1)
    db.battery_packs.update(2, name="renamed")
    for relation in db.car_battery_packs.list():
        db.car_battery_packs.remove(relation.id)

    db.reset()

    assert {name: len(rows) for name, rows in db.export().items()} == SEED_COUNTS
    assert db.battery_packs.get(2).name == "BMW i3 33.2kWh (Samsung 94Ah)"
    assert db.export() == BatteryDataBase().export()


def test_reset_seeds_an_unseeded_store():
    db = BatteryDataBase(seed=False)
    db.reset()
    assert len(db.cell_models) == CELL_MODEL_COUNT


def test_export(db: BatteryDataBase):
    data = db.export()

    assert list(data) == ["cellModels", "batteryPacks", "cars", "carBatteryPacks"]
    assert data["cellModels"][0] == {
        "id": 1,
        "manufacturer": "Shenzhen Starax Energy Technology",
        "model": "S28(B28)",
        "chemistry": "Li-ION",
        "nominalVoltage": 3.63,
        "nominalCapacityMah": 55000,
    }
    assert data["carBatteryPacks"][-1] == {"id": 28, "carId": 28, "batteryPackId": 21}
    assert set(data["batteryPacks"][0]) == {
        "id", "name", "totalCapacityKwh", "seriesCount", "parallelCount", "cellCount", "cellModelId"
    }


def test_export_is_a_snapshot(db: BatteryDataBase):
    data = db.export()
    data["cars"].clear()
    assert len(db.cars) == CAR_COUNT


def test_export_rows_start_with_id(db: BatteryDataBase):
    for name, rows in db.export().items():
        assert all(list(row)[0] == "id" for row in rows), name
