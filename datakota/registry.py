"""Cities kept in insertion order, each with an ordered list of residents."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

MAX_NAME_LENGTH = 50


class DuplicateCityError(ValueError):
    """Raised when a city with the same name is already registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Kota {name} sudah ada dalam daftar!")
        self.name = name


class CityNotFoundError(LookupError):
    """Raised when no city with the given name is registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Kota {name} tidak ditemukan!")
        self.name = name


class ResidentNotFoundError(LookupError):
    """Raised when a city has no resident with the given name."""

    def __init__(self, name: str, city: str) -> None:
        super().__init__(f"Warga {name} tidak ditemukan di kota {city}!")
        self.name = name
        self.city = city


@dataclass
class City:
    """A named city holding its residents in the order they were added."""

    name: str
    residents: list[str] = field(default_factory=list)

    def add_resident(self, name: str) -> None:
        """Append a resident; the same name may appear more than once."""
        self.residents.append(name)

    def remove_resident(self, name: str) -> None:
        """Remove the first resident with this name."""
        try:
            self.residents.remove(name)
        except ValueError:
            raise ResidentNotFoundError(name, self.name) from None

    def clear(self) -> None:
        """Remove every resident."""
        self.residents.clear()

    def __iter__(self) -> Iterator[str]:
        return iter(self.residents)

    def __len__(self) -> int:
        return len(self.residents)

    def format_residents(self) -> str:
        """Return the numbered resident listing of this city."""
        lines = [f"Daftar Warga di Kota {self.name}:"]
        if not self.residents:
            lines.append("Tidak ada warga terdaftar.")
        else:
            lines.extend(
                f"{number}. {resident}"
                for number, resident in enumerate(self.residents, start=1)
            )
        return "\n".join(lines) + "\n"


class CityRegistry:
    """An ordered collection of uniquely named cities."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._cities: list[City] = []
        for name in names:
            self.add_city(name)

    def add_city(self, name: str) -> City:
        """Register a new city at the end and return it."""
        if name in self:
            raise DuplicateCityError(name)
        city = City(name)
        self._cities.append(city)
        return city

    def remove_city(self, name: str) -> City:
        """Remove the city with this name, dropping its residents, and return it."""
        for position, city in enumerate(self._cities):
            if city.name == name:
                del self._cities[position]
                removed = City(city.name, list(city.residents))
                city.clear()
                return removed
        raise CityNotFoundError(name)

    def __contains__(self, name: object) -> bool:
        return any(city.name == name for city in self._cities)

    def __iter__(self) -> Iterator[City]:
        return iter(self._cities)

    def __len__(self) -> int:
        return len(self._cities)

    def __getitem__(self, index: int) -> City:
        return self._cities[index]

    def city_at(self, number: int) -> City:
        """Return the city at a 1-based position."""
        if not 1 <= number <= len(self._cities):
            raise IndexError(f"city number {number} out of range 1-{len(self._cities)}")
        return self._cities[number - 1]

    def clear(self) -> None:
        """Remove every city and all their residents."""
        for city in self._cities:
            city.clear()
        self._cities.clear()

    def format_cities(self) -> str:
        """Return the numbered city listing."""
        lines = ["Daftar Kota:"]
        lines.extend(
            f"{number}. {city.name}" for number, city in enumerate(self._cities, start=1)
        )
        return "\n".join(lines) + "\n"