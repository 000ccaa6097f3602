# datakota

A small interactive terminal program that keeps a list of cities and the
residents registered in each one. The program's messages are in Indonesian.

## Installing

```
pip install .
```

## Running

```
datakota
```

The program takes no options apart from `--help`. It starts with five
cities: Bandung, Jakarta, Bogor, Cimahi and Padalarang. A few residents are
already registered, and Padalarang starts with none. On each pass the
program runs the system's `clear` command (`cls` on Windows) and then lists
every city with its residents. After that it shows a menu:

```
1. Tambah Kota     add a city
2. Hapus Kota      remove a city and all of its residents
3. Tambah Warga    add a resident to a city, chosen by its number
4. Hapus Warga     remove a resident from a city, chosen by its number
0. Keluar          quit
```

City names must be unique, so the program refuses to add a city that is
already listed. Residents stay in the order they were added, and the same
name may be added more than once. Removing a resident takes out the first
one with the given name. Names typed at the menu are cut to 49 characters.
The program stops when you choose `0` or when input ends.

## What it does not do

All data is held in memory only. Nothing is saved to disk, so any cities and
residents you add are lost when the program exits. Each new run starts again
from the same five cities.

## Using it as a library

```python
from datakota.registry import CityRegistry, DuplicateCityError

registry = CityRegistry()
registry.add_city("Bandung")
bandung = registry.city_at(1)          # 1-based, as in the menu
bandung.add_resident("Zahwa")
bandung.add_resident("Nazala")

print(list(bandung))                   # ['Zahwa', 'Nazala']
print("Bandung" in registry)           # True
print(registry.format_cities())

try:
    registry.add_city("Bandung")
except DuplicateCityError as exc:
    print(exc)
```

`CityRegistry` is also indexable with 0-based positions (`registry[0]`), and
`len()` gives the number of cities. `City.format_residents()` returns the
numbered list of a city's residents. If a number is out of range,
`city_at` raises `IndexError`. If a name is not found, `remove_city` raises
`CityNotFoundError` and `City.remove_resident` raises
`ResidentNotFoundError`.

The menu loop is available as
`datakota.cli.run(registry, stdin, stdout, clear=clear_screen)`, so any text
streams can drive it. You can also pass any callable in place of the
screen-clearing step. `datakota.cli.seed_registry()` builds the starting
data. `datakota.cli.render_overview(registry)` returns the city and
resident listing that appears above the menu.