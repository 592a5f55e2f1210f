TEST_DB_NAME = "test.db"

CELL_MODEL_COUNT = 22
CAR_COUNT = 28
BATTERY_PACK_COUNT = 21
RELATION_COUNT = 28

SEED_COUNTS = {
    "cellModels": CELL_MODEL_COUNT,
    "cars": CAR_COUNT,
    "batteryPacks": BATTERY_PACK_COUNT,
    "carBatteryPacks": RELATION_COUNT,
}

TESLA_MODEL_Y = dict(brand="Tesla", model="Model Y", yearStart=2024)

SAMSUNG_60AH_ID = 17  # referenced by the BMW i3 21.6kWh pack
BMW_I3_PACK_ID = 1
BMW_I3_CAR_ID = 1
