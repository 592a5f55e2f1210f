"""
Initial dataset loaded into a fresh store.

Rows reference each other by the ids they receive when inserted in the order
cell models, cars, battery packs, car/battery pack relations.
"""

CELL_MODELS = [
    dict(manufacturer="Shenzhen Starax Energy Technology", model="S28(B28)", chemistry="Li-ION", nominalVoltage=3.63, nominalCapacityMah=55000),
    dict(manufacturer="LG", model="E63", chemistry="Li-iON", nominalVoltage=3.6, nominalCapacityMah=64800),
    dict(manufacturer="Panasonic", model="NCR18650B", chemistry="Li-ION", nominalVoltage=3.6, nominalCapacityMah=3350),
    dict(manufacturer="LG", model="INR21700-M50", chemistry="Li-ION", nominalVoltage=3.63, nominalCapacityMah=None),
    dict(manufacturer="Panasonic", model="NCR21700", chemistry="Li-ION", nominalVoltage=3.6, nominalCapacityMah=5000),
    dict(manufacturer="Panasonic", model="Prismatic PHEV2 - 22Ah", chemistry="Li-ION", nominalVoltage=3.6, nominalCapacityMah=22000),
    dict(manufacturer="Panasonic", model="Prismatic PHEV2 - 25Ah", chemistry="Li-ION", nominalVoltage=3.6, nominalCapacityMah=25000),
    dict(manufacturer="Panasonic", model="Prismatic PHEV2 - 51Ah", chemistry="Li-ION", nominalVoltage=3.7, nominalCapacityMah=51000),
    dict(manufacturer="Ennocar", model="EC-H-Series-INS-G2-100.8", chemistry="Ni-MH", nominalVoltage=14.4, nominalCapacityMah=6500),
    dict(manufacturer="Ennocar", model="EC-T-SERIES-SP-AQUA-7.2V", chemistry="Ni-MH", nominalVoltage=7.2, nominalCapacityMah=6500),
    dict(manufacturer="AESC", model="32,5Ah Pouch", chemistry="Li-ION", nominalVoltage=3.8, nominalCapacityMah=65000),
    dict(manufacturer="AESC", model="43Ah Pouch", chemistry="Li-ION", nominalVoltage=3.7, nominalCapacityMah=86000),
    dict(manufacturer="GS Yuasa", model="LEV40", chemistry="Li-ION", nominalVoltage=3.75, nominalCapacityMah=40000),
    dict(manufacturer="GS Yuasa", model="LEV40N", chemistry="Li-ION", nominalVoltage=3.75, nominalCapacityMah=40000),
    dict(manufacturer="GS Yuasa", model="LEV50", chemistry="Li-ION", nominalVoltage=3.75, nominalCapacityMah=50000),
    dict(manufacturer="GS Yuasa", model="LEV50N", chemistry="Li-ION", nominalVoltage=3.75, nominalCapacityMah=40000),
    dict(manufacturer="Samsung SDI", model="Prismatic 60Ah", chemistry="Li-ION", nominalVoltage=3.68, nominalCapacityMah=60000),
    dict(manufacturer="Samsung SDI", model="Prismatic 94Ah", chemistry="Li-ION", nominalVoltage=3.68, nominalCapacityMah=94000),
    dict(manufacturer="Samsung SDI", model="Prismatic 120Ah", chemistry="Li-ION", nominalVoltage=3.68, nominalCapacityMah=120000),
    dict(manufacturer="Toyota", model="NP2.0", chemistry="Ni-MH", nominalVoltage=7.2, nominalCapacityMah=6500),
    dict(manufacturer="Panasonic", model="NCR2170A", chemistry="Li-ION", nominalVoltage=3.6, nominalCapacityMah=4800),
    dict(manufacturer="Panasonic", model="NCR18650GA", chemistry="Li-ION", nominalVoltage=3.6, nominalCapacityMah=3500),
]

CARS = [
    dict(brand="BMW", model="i3", trim=None, yearStart=2013, yearEnd=2016),
    dict(brand="BMW", model="i3", trim=None, yearStart=2016, yearEnd=2018),
    dict(brand="BMW", model="i3s", trim=None, yearStart=2017, yearEnd=2018),
    dict(brand="Citroën", model="C-zero", trim=None, yearStart=2010, yearEnd=2013),
    dict(brand="Citroën", model="C-zero", trim=None, yearStart=2013, yearEnd=2016),
    dict(brand="Citroën", model="C-zero", trim=None, yearStart=2016, yearEnd=2020),
    dict(brand="Hyundai", model="Kona", trim="64kWh", yearStart=2017, yearEnd=2023),
    dict(brand="Hyundai", model="Kona", trim="39.2kWh", yearStart=2017, yearEnd=2023),
    dict(brand="Mitsubishi", model="i-MiEV", trim=None, yearStart=2010, yearEnd=2013),
    dict(brand="Mitsubishi", model="i-MiEV", trim=None, yearStart=2013, yearEnd=2016),
    dict(brand="Mitsubishi", model="i-MiEV", trim=None, yearStart=2016, yearEnd=2020),
    dict(brand="Mitsubishi", model="Outlander PHEV", trim=None, yearStart=2013, yearEnd=2018),
    dict(brand="Mitsubishi", model="Outlander PHEV", trim=None, yearStart=2018, yearEnd=2021),
    dict(brand="Mitsubishi", model="Outlander PHEV", trim=None, yearStart=2021, yearEnd=2024),
    dict(brand="Nissan", model="Leaf", trim="24kWh", yearStart=2010, yearEnd=2016),
    dict(brand="Nissan", model="Leaf", trim="30kWh", yearStart=2016, yearEnd=2017),
    dict(brand="Peugeot", model="iOn", trim=None, yearStart=2010, yearEnd=2013),
    dict(brand="Peugeot", model="iOn", trim=None, yearStart=2013, yearEnd=2016),
    dict(brand="Peugeot", model="iOn", trim=None, yearStart=2016, yearEnd=2020),
    dict(brand="Tesla", model="Model 3", trim="Long Range Performance", yearStart=2019, yearEnd=2020),
    dict(brand="Tesla", model="Model 3", trim="Standard Range Plus", yearStart=2019, yearEnd=2020),
    dict(brand="Tesla", model="Model S", trim="P85", yearStart=2012, yearEnd=2014),
    dict(brand="Tesla", model="Model S", trim="P100D", yearStart=2016, yearEnd=2019),
    dict(brand="Tesla", model="Model X", trim="P100D", yearStart=2017, yearEnd=2019),
    dict(brand="Toyota", model="Prius", trim=None, yearStart=2000, yearEnd=2003),
    dict(brand="Toyota", model="Prius", trim=None, yearStart=2003, yearEnd=2009),
    dict(brand="Toyota", model="Prius PHEV", trim=None, yearStart=2012, yearEnd=2016),
    dict(brand="Toyota", model="Prius PHEV", trim=None, yearStart=2016, yearEnd=2022),
]

BATTERY_PACKS = [
    dict(name="BMW i3 21.6kWh (Samsung 60Ah)", totalCapacityKwh=21.6, seriesCount=None, parallelCount=None, cellCount=None, cellModelId=17),
    dict(name="BMW i3 33.2kWh (Samsung 94Ah)", totalCapacityKwh=33.2, seriesCount=None, parallelCount=None, cellCount=None, cellModelId=18),
    dict(name="Citroën C-zero 16kWh (LEV50)", totalCapacityKwh=16.0, seriesCount=None, parallelCount=None, cellCount=None, cellModelId=15),
    dict(name="Citroën C-zero 16kWh (LEV50N)", totalCapacityKwh=16.0, seriesCount=None, parallelCount=None, cellCount=None, cellModelId=16),
    dict(name="Hyundai Kona 64kWh", totalCapacityKwh=64.0, seriesCount=None, parallelCount=None, cellCount=None, cellModelId=1),
    dict(name="Hyundai Kona 39.2kWh", totalCapacityKwh=39.2, seriesCount=None, parallelCount=None, cellCount=None, cellModelId=1),
    dict(name="Mitsubishi i-MiEV 16kWh (LEV50)", totalCapacityKwh=16.0, seriesCount=None, parallelCount=None, cellCount=None, cellModelId=15),
    dict(name="Mitsubishi i-MiEV 16kWh (LEV50N)", totalCapacityKwh=16.0, seriesCount=None, parallelCount=None, cellCount=None, cellModelId=16),
    dict(name="Mitsubishi Outlander 12kWh", totalCapacityKwh=12.0, seriesCount=None, parallelCount=None, cellCount=None, cellModelId=13),
    dict(name="Mitsubishi Outlander 13.8kWh", totalCapacityKwh=13.8, seriesCount=None, parallelCount=None, cellCount=None, cellModelId=14),
    dict(name="Mitsubishi Outlander 20kWh", totalCapacityKwh=20.0, seriesCount=None, parallelCount=None, cellCount=None, cellModelId=14),
    dict(name="Nissan Leaf 24kWh", totalCapacityKwh=24.0, seriesCount=None, parallelCount=None, cellCount=None, cellModelId=11),
    dict(name="Nissan Leaf 30kWh", totalCapacityKwh=30.0, seriesCount=None, parallelCount=None, cellCount=None, cellModelId=12),
    dict(name="Tesla Model 3 LR 78.8kWh", totalCapacityKwh=78.8, seriesCount=None, parallelCount=None, cellCount=None, cellModelId=21),
    dict(name="Tesla Model 3 SR 53.1kWh", totalCapacityKwh=53.1, seriesCount=None, parallelCount=None, cellCount=None, cellModelId=21),
    dict(name="Tesla Model S 85kWh", totalCapacityKwh=85.0, seriesCount=None, parallelCount=None, cellCount=None, cellModelId=3),
    dict(name="Tesla Model S 100kWh", totalCapacityKwh=100.0, seriesCount=None, parallelCount=None, cellCount=None, cellModelId=22),
    dict(name="Toyota Prius 1.78kWh", totalCapacityKwh=1.78, seriesCount=None, parallelCount=None, cellCount=None, cellModelId=20),
    dict(name="Toyota Prius 1.3kWh", totalCapacityKwh=1.3, seriesCount=None, parallelCount=None, cellCount=None, cellModelId=20),
    dict(name="Toyota Prius PHEV 5.2kWh", totalCapacityKwh=5.2, seriesCount=None, parallelCount=None, cellCount=None, cellModelId=6),
    dict(name="Toyota Prius PHEV 8.8kWh", totalCapacityKwh=8.8, seriesCount=None, parallelCount=None, cellCount=None, cellModelId=6),
]

CAR_BATTERY_PACKS = [
    dict(carId=1, batteryPackId=1),
    dict(carId=2, batteryPackId=2),
    dict(carId=3, batteryPackId=2),
    dict(carId=4, batteryPackId=3),
    dict(carId=5, batteryPackId=4),
    dict(carId=6, batteryPackId=4),
    dict(carId=7, batteryPackId=5),
    dict(carId=8, batteryPackId=6),
    dict(carId=9, batteryPackId=7),
    dict(carId=10, batteryPackId=8),
    dict(carId=11, batteryPackId=8),
    dict(carId=12, batteryPackId=9),
    dict(carId=13, batteryPackId=10),
    dict(carId=14, batteryPackId=11),
    dict(carId=15, batteryPackId=12),
    dict(carId=16, batteryPackId=13),
    dict(carId=17, batteryPackId=3),
    dict(carId=18, batteryPackId=4),
    dict(carId=19, batteryPackId=4),
    dict(carId=20, batteryPackId=14),
    dict(carId=21, batteryPackId=15),
    dict(carId=22, batteryPackId=16),
    dict(carId=23, batteryPackId=17),
    dict(carId=24, batteryPackId=17),
    dict(carId=25, batteryPackId=18),
    dict(carId=26, batteryPackId=19),
    dict(carId=27, batteryPackId=20),
    dict(carId=28, batteryPackId=21),
]
