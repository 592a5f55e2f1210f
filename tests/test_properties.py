from hypothesis import given, settings
from hypothesis import strategies as st

from battery_sqlite import BatteryDataBase, Car

settings.register_profile("battery-sqlite", deadline=1000, max_examples=50)
settings.load_profile("battery-sqlite")

years = st.one_of(st.none(), st.integers(min_value=1900, max_value=2100))
text = st.text(alphabet=st.characters(exclude_categories=("Cs",), exclude_characters="\x00"), max_size=20)


@st.composite
def car_values(draw):
    values = dict(brand=draw(text), model=draw(text), trim=draw(st.one_of(st.none(), text)),
                  yearStart=draw(years), yearEnd=draw(years))
    # drop some fields so the defaults are exercised
    keep = draw(st.sets(st.sampled_from(sorted(values))))
    return {key: value for key, value in values.items() if key in keep}


@given(values=car_values())
def test_create_then_get_equals_defaults_merged_with_input(values):
    db = BatteryDataBase(seed=False)
    car = db.cars.create(values)

    expected = {"brand": "", "model": "", "trim": None, "yearStart": None, "yearEnd": None, **values}
    assert db.cars.get(car.id) == Car(id=car.id, **expected)


@given(creates=st.integers(min_value=1, max_value=8), data=st.data())
def test_ids_are_max_plus_one(creates, data):
    db = BatteryDataBase(seed=False)
    for _ in range(creates):
        db.cars.create(brand="BMW")

    removed = data.draw(st.sets(st.integers(min_value=1, max_value=creates)))
    for id in removed:
        db.cars.remove(id)

    remaining = [car.id for car in db.cars.list()]
    assert db.cars.create(brand="Fiat").id == max(remaining, default=0) + 1


@given(field=st.sampled_from(["brand", "model", "trim", "yearStart", "yearEnd"]), data=st.data())
def test_update_changes_only_the_given_field(field, data):
    db = BatteryDataBase(seed=False)
    car = db.cars.create(brand="Nissan", model="Leaf", trim="24kWh", yearStart=2010, yearEnd=2016)

    value = data.draw(years if field.startswith("year") else text)
    updated = db.cars.update(car.id, {field: value})

    before = car.model_dump(by_alias=True)
    after = updated.model_dump(by_alias=True)
    assert after[field] == value
    assert {k: v for k, v in after.items() if k != field} == {k: v for k, v in before.items() if k != field}
    assert db.cars.get(car.id) == updated
