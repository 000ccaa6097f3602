import pytest

from datakota.registry import (
    City,
    CityNotFoundError,
    CityRegistry,
    DuplicateCityError,
    ResidentNotFoundError,
)


def names(registry):
    return [city.name for city in registry]


def test_add_city_registers_in_order():
    registry = CityRegistry()
    registry.add_city("Bandung")
    registry.add_city("Jakarta")
    assert names(registry) == ["Bandung", "Jakarta"]
    assert len(registry) == 2
    assert "Bandung" in registry
    assert "Bogor" not in registry


def test_add_city_returns_empty_city():
    registry = CityRegistry()
    city = registry.add_city("Bogor")
    assert city is registry[0]
    assert len(city) == 0


def test_duplicate_city_rejected():
    registry = CityRegistry(["Bandung"])
    with pytest.raises(DuplicateCityError) as info:
        registry.add_city("Bandung")
    assert str(info.value) == "Kota Bandung sudah ada dalam daftar!"
    assert len(registry) == 1


def test_registry_grows_past_many_cities():
    city_names = [f"Kota{n}" for n in range(25)]
    registry = CityRegistry(city_names)
    assert names(registry) == city_names


def test_remove_city_keeps_order_of_rest():
    registry = CityRegistry(["Bandung", "Jakarta", "Bogor"])
    registry[1].add_resident("Suci")
    removed = registry.remove_city("Jakarta")
    assert names(registry) == ["Bandung", "Bogor"]
    assert removed.name == "Jakarta"
    assert list(removed) == ["Suci"]


def test_remove_missing_city_raises():
    registry = CityRegistry(["Bandung"])
    with pytest.raises(CityNotFoundError) as info:
        registry.remove_city("Cimahi")
    assert str(info.value) == "Kota Cimahi tidak ditemukan!"
    assert names(registry) == ["Bandung"]


def test_removed_city_can_be_added_again_empty():
    registry = CityRegistry(["Bandung"])
    registry[0].add_resident("Zahwa")
    registry.remove_city("Bandung")
    city = registry.add_city("Bandung")
    assert list(city) == []


def test_residents_keep_insertion_order_and_duplicates():
    city = City("Bandung")
    for resident in ["Zahwa", "Nazala", "Zahwa"]:
        city.add_resident(resident)
    assert list(city) == ["Zahwa", "Nazala", "Zahwa"]
    assert len(city) == 3


def test_remove_resident_removes_first_match():
    city = City("Bandung", ["Zahwa", "Nazala", "Zahwa"])
    city.remove_resident("Zahwa")
    assert list(city) == ["Nazala", "Zahwa"]


@pytest.mark.parametrize(
    "target, expected",
    [
        ("Zahwa", ["Nazala", "Suci"]),
        ("Nazala", ["Zahwa", "Suci"]),
        ("Suci", ["Zahwa", "Nazala"]),
    ],
)
def test_remove_resident_any_position(target, expected):
    city = City("Bandung", ["Zahwa", "Nazala", "Suci"])
    city.remove_resident(target)
    assert list(city) == expected


def test_remove_only_resident_then_add_again():
    city = City("Cimahi", ["Zena"])
    city.remove_resident("Zena")
    assert len(city) == 0
    city.add_resident("Suci")
    assert list(city) == ["Suci"]


def test_remove_missing_resident_raises():
    city = City("Bogor", ["Sulistiawati"])
    with pytest.raises(ResidentNotFoundError) as info:
        city.remove_resident("Zena")
    assert str(info.value) == "Warga Zena tidak ditemukan di kota Bogor!"
    assert list(city) == ["Sulistiawati"]


def test_city_clear():
    city = City("Bandung", ["Zahwa", "Nazala"])
    city.clear()
    assert list(city) == []


def test_format_residents_lists_numbered():
    city = City("Bandung", ["Zahwa", "Nazala"])
    assert city.format_residents() == (
        "Daftar Warga di Kota Bandung:\n1. Zahwa\n2. Nazala\n"
    )


def test_format_residents_empty():
    city = City("Padalarang")
    assert city.format_residents() == (
        "Daftar Warga di Kota Padalarang:\nTidak ada warga terdaftar.\n"
    )


def test_format_cities():
    registry = CityRegistry(["Bandung", "Jakarta"])
    assert registry.format_cities() == "Daftar Kota:\n1. Bandung\n2. Jakarta\n"


def test_format_cities_empty():
    assert CityRegistry().format_cities() == "Daftar Kota:\n"


def test_city_at_is_one_based():
    registry = CityRegistry(["Bandung", "Jakarta"])
    assert registry.city_at(1) is registry[0]
    assert registry.city_at(2).name == "Jakarta"


@pytest.mark.parametrize("number", [0, 3, -1])
def test_city_at_out_of_range(number):
    registry = CityRegistry(["Bandung", "Jakarta"])
    with pytest.raises(IndexError):
        registry.city_at(number)


def test_registry_clear():
    registry = CityRegistry(["Bandung", "Jakarta"])
    first = registry[0]
    first.add_resident("Zahwa")
    registry.clear()
    assert len(registry) == 0
    assert len(first) == 0
    assert "Bandung" not in registry