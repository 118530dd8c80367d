import json

from app.database.db import InMemoryCarStore, JsonFileCarStore
from app.utilities.helper import get_next_id


def make_car(car_id, **overrides):
    car = {
        "id": car_id,
        "make": "Honda",
        "model": "Civic",
        "year": 2018,
        "price": 15000,
        "imageUrl": None,
    }
    car.update(overrides)
    return car


def test_missing_file_reads_empty(file_store):
    assert file_store.read_all() == []


def test_malformed_file_reads_empty(file_store):
    with open(file_store.path, "w", encoding="utf-8") as f:
        f.write("{not json")
    assert file_store.read_all() == []


def test_non_array_file_reads_empty(file_store):
    with open(file_store.path, "w", encoding="utf-8") as f:
        json.dump({"id": 1}, f)
    assert file_store.read_all() == []


def test_write_then_read_keeps_fields(file_store):
    cars = [
        make_car(1),
        make_car(2, make="Škoda", model="Octavia", imageUrl="/public/uploads/1-a.jpg"),
        make_car(3, year=None, price=None),
    ]
    file_store.write_all(cars)
    assert file_store.read_all() == cars


def test_write_uses_four_space_indent(file_store):
    file_store.write_all([make_car(1)])
    with open(file_store.path, "r", encoding="utf-8") as f:
        text = f.read()
    assert text.startswith("[\n    {\n        \"id\": 1,")


def test_write_overwrites_whole_file(file_store):
    file_store.write_all([make_car(1), make_car(2)])
    file_store.write_all([make_car(3)])
    assert [car["id"] for car in file_store.read_all()] == [3]


def test_write_creates_parent_directories(tmp_path):
    store = JsonFileCarStore(str(tmp_path / "nested" / "dir" / "cars.json"))
    store.write_all([make_car(1)])
    assert store.read_all() == [make_car(1)]


def test_in_memory_store_hands_out_copies():
    store = InMemoryCarStore([make_car(1)])
    cars = store.read_all()
    cars.append(make_car(2))
    assert store.read_all() == [make_car(1)]

    store.write_all(cars)
    assert len(store.read_all()) == 2


def test_next_id_starts_at_one():
    assert get_next_id([]) == 1


def test_next_id_follows_highest_id():
    assert get_next_id([make_car(3), make_car(9), make_car(4)]) == 10


def test_next_id_ignores_records_without_id():
    cars = [{"make": "Ford"}, make_car(2), make_car(None)]
    assert get_next_id(cars) == 3


def test_next_id_skips_non_object_entries():
    assert get_next_id([1, 2, "three", None]) == 1


def test_next_id_skips_non_integer_ids():
    cars = [make_car("12"), make_car(4), make_car(True), make_car(2.5)]
    assert get_next_id(cars) == 5


def test_next_id_never_goes_below_one():
    assert get_next_id([make_car(-3)]) == 1
