"""Interactive menu for managing cities and their residents."""

from __future__ import annotations

import argparse
import os
import re
import subprocess
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from datakota.registry import (
    MAX_NAME_LENGTH,
    CityNotFoundError,
    CityRegistry,
    DuplicateCityError,
    ResidentNotFoundError,
)

_RULE = "================================="
_CONTINUE = "Tekan Enter untuk melanjutkan..."
_INTEGER = re.compile(r"\s*([+-]?\d+)")

_MENU = (
    f"{_RULE}\n"
    "             M E N U            \n"
    f"{_RULE}\n"
    "1. Tambah Kota\n"
    "2. Hapus Kota\n"
    "3. Tambah Warga\n"
    "4. Hapus Warga\n"
    "0. Keluar\n"
    "Pilih menu: "
)


def seed_registry() -> CityRegistry:
    """Return the registry the program starts with."""
    registry = CityRegistry(["Bandung", "Jakarta", "Bogor", "Cimahi", "Padalarang"])
    registry[0].add_resident("Zahwa")
    registry[0].add_resident("Nazala")
    registry[1].add_resident("Suci")
    registry[2].add_resident("Sulistiawati")
    registry[3].add_resident("Zena")
    return registry


def render_overview(registry: CityRegistry) -> str:
    """Return the listing of every city with its residents."""
    parts = [f"{_RULE}\n        DATA KOTA & WARGA        \n{_RULE}\n"]
    for number, city in enumerate(registry, start=1):
        parts.append(f"{number}. Kota {city.name}\n")
        if len(city) == 0:
            parts.append("   - Tidak ada warga\n")
        else:
            parts.extend(f"   - {resident}\n" for resident in city)
        parts.append("\n")
    return "".join(parts)


def clear_screen() -> None:
    """Clear the terminal using the system's clear command."""
    command = "cls" if os.name == "nt" else "clear"
    try:
        subprocess.run(command, shell=True, check=False)
    except OSError:
        pass


def _read_line(stdin: TextIO) -> str:
    line = stdin.readline()
    if not line:
        raise EOFError
    return line.rstrip("\n")


def _read_name(stdin: TextIO) -> str:
    return _read_line(stdin)[: MAX_NAME_LENGTH - 1]


def _read_int(stdin: TextIO) -> int | None:
    match = _INTEGER.match(_read_line(stdin))
    return int(match.group(1)) if match else None


def _choose_city(registry: CityRegistry, stdin: TextIO, stdout: TextIO):
    stdout.write(registry.format_cities())
    stdout.write(f"Pilih nomor kota (1-{len(registry)}): ")
    stdout.flush()
    number = _read_int(stdin)
    if number is None:
        return None
    try:
        return registry.city_at(number)
    except IndexError:
        return None


def _pause(stdin: TextIO, stdout: TextIO) -> None:
    stdout.write(_CONTINUE)
    stdout.flush()
    _read_line(stdin)


def run(
    registry: CityRegistry,
    stdin: TextIO,
    stdout: TextIO,
    clear: Callable[[], None] = clear_screen,
) -> None:
    """Run the menu loop until the user exits or input ends."""
    try:
        while True:
            clear()
            stdout.write(render_overview(registry))
            stdout.write(_MENU)
            stdout.flush()
            choice = _read_int(stdin)

            if choice == 1:
                stdout.write("Masukkan nama kota baru: ")
                stdout.flush()
                name = _read_name(stdin)
                try:
                    registry.add_city(name)
                except DuplicateCityError as error:
                    stdout.write(f"{error}\n")
                else:
                    stdout.write(f"Kota {name} berhasil ditambahkan!\n")
                _pause(stdin, stdout)
            elif choice == 2:
                stdout.write("Masukkan nama kota yang akan dihapus: ")
                stdout.flush()
                name = _read_name(stdin)
                try:
                    registry.remove_city(name)
                except CityNotFoundError as error:
                    stdout.write(f"{error}\n")
                else:
                    stdout.write(f"Kota {name} berhasil dihapus!\n")
                _pause(stdin, stdout)
            elif choice == 3:
                city = _choose_city(registry, stdin, stdout)
                if city is None:
                    stdout.write("Nomor kota tidak valid!\n")
                else:
                    stdout.write("Masukkan nama warga baru: ")
                    stdout.flush()
                    resident = _read_name(stdin)
                    city.add_resident(resident)
                    stdout.write(
                        f"Warga {resident} berhasil ditambahkan di kota {city.name}!\n"
                    )
                _pause(stdin, stdout)
            elif choice == 4:
                city = _choose_city(registry, stdin, stdout)
                if city is None:
                    stdout.write("Nomor kota tidak valid!\n")
                else:
                    stdout.write(city.format_residents())
                    stdout.write("Masukkan nama warga yang akan dihapus: ")
                    stdout.flush()
                    resident = _read_name(stdin)
                    try:
                        city.remove_resident(resident)
                    except ResidentNotFoundError as error:
                        stdout.write(f"{error}\n")
                    else:
                        stdout.write(
                            f"Warga {resident} berhasil dihapus dari kota {city.name}!\n"
                        )
                _pause(stdin, stdout)
            elif choice == 0:
                stdout.write("Terima kasih telah menggunakan program ini!\n")
                stdout.flush()
                registry.clear()
                return
            else:
                stdout.write("Pilihan tidak valid!\n")
                _pause(stdin, stdout)
    except EOFError:
        stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive city and resident menu."""
    parser = argparse.ArgumentParser(
        prog="datakota", description="Manage cities and their residents."
    )
    parser.parse_args(argv)
    run(seed_registry(), sys.stdin, sys.stdout, clear_screen)
    return 0