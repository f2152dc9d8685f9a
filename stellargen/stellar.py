"""Stellar object categories, subtypes and a random stellar object factory."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from os import PathLike
from typing import Protocol, TypeVar, Union

logger = logging.getLogger(__name__)

STEFAN_BOLTZMANN = 5.670374419e-8

T = TypeVar("T")


class StellarParseError(ValueError):
    """Raised when a category or subtype name is not recognised."""


class StellarCategory(Enum):
    """Broad class of a stellar object; the value is its display label."""

    MAIN_SEQUENCE = "Main Sequence"
    GIANT = "Giant"
    WOLF_RAYET = "Wolf-Rayet"
    WHITE_DWARF = "White Dwarf"
    NEUTRON_STAR = "Neutron Star"
    BLACK_HOLE = "Black Hole"
    BROWN_DWARF = "Brown Dwarf"


class StellarSubtype(Enum):
    """Spectral or structural subtype; the value is its display label."""

    O = "O"
    B = "B"
    A = "A"
    F = "F"
    G = "G"
    K = "K"
    M = "M"

    RED_GIANT = "Red Giant"
    BLUE_GIANT = "Blue Giant"
    RED_SUPER_GIANT = "Red Super Giant"
    BLUE_SUPER_GIANT = "Blue Super Giant"
    YELLOW_SUPER_GIANT = "Yellow Super Giant"
    HYPER_GIANT = "Hyper Giant"

    L = "L"
    T = "T"
    Y = "Y"

    DA = "DA"
    DB = "DB"
    DC = "DC"
    DO = "DO"
    DQ = "DQ"
    DZ = "DZ"
    DX = "DX"

    WN = "WN"
    WC = "WC"
    WO = "WO"

    STANDARD_NEUTRON_STAR = "Standard Neutron Star"
    PULSAR = "Pulsar"
    MAGNETAR = "Magnetar"

    STELLAR_BLACK_HOLE = "Stellar Black Hole"
    INTERMEDIATE_BLACK_HOLE = "Intermediate Black Hole"
    SUPERMASSIVE_BLACK_HOLE = "Supermassive Black Hole"
    PRIMORDIAL_BLACK_HOLE = "Primordial Black Hole"


_CATEGORY_NAMES = {
    "MainSequence": StellarCategory.MAIN_SEQUENCE,
    "Giant": StellarCategory.GIANT,
    "BrownDwarf": StellarCategory.BROWN_DWARF,
    "WhiteDwarf": StellarCategory.WHITE_DWARF,
    "NeutronStar": StellarCategory.NEUTRON_STAR,
    "WolfRayet": StellarCategory.WOLF_RAYET,
    "BlackHole": StellarCategory.BLACK_HOLE,
}

_SUBTYPE_NAMES = {
    **{s.value: s for s in (
        StellarSubtype.O, StellarSubtype.B, StellarSubtype.A, StellarSubtype.F,
        StellarSubtype.G, StellarSubtype.K, StellarSubtype.M,
        StellarSubtype.L, StellarSubtype.T, StellarSubtype.Y,
        StellarSubtype.DA, StellarSubtype.DB, StellarSubtype.DC, StellarSubtype.DO,
        StellarSubtype.DQ, StellarSubtype.DZ, StellarSubtype.DX,
        StellarSubtype.WN, StellarSubtype.WC, StellarSubtype.WO,
        StellarSubtype.PULSAR, StellarSubtype.MAGNETAR,
    )},
    "RedGiant": StellarSubtype.RED_GIANT,
    "BlueGiant": StellarSubtype.BLUE_GIANT,
    "RedSuperGiant": StellarSubtype.RED_SUPER_GIANT,
    "BlueSuperGiant": StellarSubtype.BLUE_SUPER_GIANT,
    "YellowSuperGiant": StellarSubtype.YELLOW_SUPER_GIANT,
    "HyperGiant": StellarSubtype.HYPER_GIANT,
    "StandardNeutronStar": StellarSubtype.STANDARD_NEUTRON_STAR,
    "StellarBlackHole": StellarSubtype.STELLAR_BLACK_HOLE,
    "IntermediateBlackHole": StellarSubtype.INTERMEDIATE_BLACK_HOLE,
    "SupermassiveBlackHole": StellarSubtype.SUPERMASSIVE_BLACK_HOLE,
    "PrimordialBlackHole": StellarSubtype.PRIMORDIAL_BLACK_HOLE,
}

_SUBTYPE_ORDER = {subtype: i for i, subtype in enumerate(StellarSubtype)}


def category_to_string(category) -> str:
    """Display label of a category, or ``"Unknown"``."""
    if isinstance(category, StellarCategory):
        return category.value
    return "Unknown"


def parse_category(text: str) -> StellarCategory:
    """Parse a category identifier such as ``"MainSequence"``."""
    try:
        return _CATEGORY_NAMES[text]
    except KeyError:
        raise StellarParseError(f"Unknown stellar category: {text}") from None


def subtype_to_string(subtype) -> str:
    """Display label of a subtype, or ``"Unknown"``."""
    if isinstance(subtype, StellarSubtype):
        return subtype.value
    return "Unknown"


def parse_subtype(text: str) -> StellarSubtype:
    """Parse a subtype identifier such as ``"RedGiant"`` or ``"G"``."""
    try:
        return _SUBTYPE_NAMES[text]
    except KeyError:
        raise StellarParseError(f"Unknown stellar subtype: {text}") from None


class UniformSource(Protocol):
    def uniform(self, a: float, b: float) -> float: ...


def pick_weighted(entries: Sequence[tuple[T, float]], rng: UniformSource) -> T:
    """Pick a value from ``(value, weight)`` pairs in proportion to the weights."""
    if not entries:
        raise ValueError("cannot pick from an empty list of entries")
    total = sum(weight for _, weight in entries if weight > 0)
    if total <= 0:
        raise ValueError("weights must sum to a positive value")
    r = rng.uniform(0.0, total)
    cumulative = 0.0
    last_positive = None
    for value, weight in entries:
        if weight <= 0:
            continue
        cumulative += weight
        last_positive = value
        if r < cumulative:
            return value
    return last_positive


def _g(value: float, width: int = 0) -> str:
    return f"{value:>{width}g}" if width else f"{value:g}"


@dataclass
class StellarObject:
    """A generated star or stellar remnant."""

    name: str = ""
    category: StellarCategory = StellarCategory.MAIN_SEQUENCE
    subtype: StellarSubtype = StellarSubtype.O
    mass: float = 0.0
    radius: float = 0.0
    temperature: float = 0.0
    luminosity: float = 0.0

    def info_str(self) -> str:
        """Multi-line human-readable description."""
        return (
            "===== Stellar Object =====\n"
            f"Name: {self.name}\n"
            f"Category: {category_to_string(self.category)}\n"
            f"Subtype: {subtype_to_string(self.subtype)}\n"
            f"Mass: {_g(self.mass)} solar masses\n"
            f"Radius: {_g(self.radius)} km\n"
            f"Temperature: {_g(self.temperature)} K\n"
            f"Luminosity: {_g(self.luminosity)} \n"
        )


@dataclass
class StellarSubtypeData:
    """Probability and physical ranges of one subtype."""

    category: StellarCategory = StellarCategory.MAIN_SEQUENCE
    subtype: StellarSubtype = StellarSubtype.O
    probability: float = 0.0
    min_mass: float = 0.0
    max_mass: float = 0.0
    min_radius: float = 0.0
    max_radius: float = 0.0
    min_temperature: float = 0.0
    max_temperature: float = 0.0


_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _parse_float(text: str) -> float:
    """Parse the leading number of ``text``, ignoring anything after it."""
    match = _FLOAT_PREFIX.match(text)
    if not match:
        raise ValueError(f"no number in {text!r}")
    return float(match.group(1))


def _fields(line: str) -> list[str]:
    parts = line.split(",")
    if parts and parts[-1] == "":
        parts.pop()
    return [part.strip(" \t") for part in parts]


def _clean_lines(lines: Iterable[str]):
    for line in lines:
        line = line[:-1] if line.endswith("\n") else line
        if line:
            yield line


_NUMERIC_COLUMNS = {
    "Probability": "probability",
    "MinMassSolar": "min_mass",
    "MaxMassSolar": "max_mass",
    "MinRadiusKm": "min_radius",
    "MaxRadiusKm": "max_radius",
    "MinTemperatureK": "min_temperature",
    "MaxTemperatureK": "max_temperature",
}


class StellarObjectFactory:
    """Generates random stellar objects from category and subtype tables."""

    def __init__(
        self, category_lines: Iterable[str], subtype_lines: Iterable[str]
    ) -> None:
        self.category_entries: list[tuple[StellarCategory, float]] = []
        self.subtype_entries: dict[
            StellarCategory, list[tuple[StellarSubtype, float]]
        ] = {}
        self.subtype_database: dict[StellarSubtype, StellarSubtypeData] = {}
        self.load_categories(category_lines)
        self.load_subtypes(subtype_lines)

    @classmethod
    def from_files(
        cls,
        category_path: Union[str, PathLike],
        subtype_path: Union[str, PathLike],
    ) -> "StellarObjectFactory":
        """Build a factory from two CSV files."""
        with open(category_path, encoding="utf-8") as category_file, open(
            subtype_path, encoding="utf-8"
        ) as subtype_file:
            return cls(category_file, subtype_file)

    def load_categories(self, lines: Iterable[str]) -> None:
        """Read ``Category,Probability`` rows after a header line."""
        rows = _clean_lines(lines)
        next(rows, None)
        for line in rows:
            fields = _fields(line)
            if len(fields) < 2:
                continue
            category_str, prob_str = fields[0], fields[1]
            ok = True
            try:
                category = parse_category(category_str)
            except StellarParseError:
                ok = False
            try:
                probability = _parse_float(prob_str)
            except ValueError:
                logger.warning(
                    "StellarObjectFactory: Failed to parse probability for %s: %s",
                    category_str,
                    prob_str,
                )
                ok = False
            if ok:
                self.category_entries.append((category, probability))

    def load_subtypes(self, lines: Iterable[str]) -> None:
        """Read subtype rows whose columns are named by a header line."""
        rows = _clean_lines(lines)
        first = next(rows, None)
        if first is None:
            return
        header = _fields(first)
        for line in rows:
            data = StellarSubtypeData()
            subtype_found = False
            for column, value in zip(header, _fields(line)):
                try:
                    if column == "Category":
                        data.category = parse_category(value)
                    elif column == "Subtype":
                        data.subtype = parse_subtype(value)
                        subtype_found = True
                    elif column in _NUMERIC_COLUMNS:
                        setattr(data, _NUMERIC_COLUMNS[column], _parse_float(value))
                except StellarParseError as err:
                    logger.error(
                        "StellarObjectFactory: Subtype loading error: %s", err
                    )
                except ValueError as err:
                    logger.error(
                        "StellarObjectFactory: Subtype loading parsing error: "
                        "%s = '%s' : %s",
                        column,
                        value,
                        err,
                    )
            if subtype_found:
                self.subtype_database[data.subtype] = data
                self.subtype_entries.setdefault(data.category, []).append(
                    (data.subtype, data.probability)
                )
            else:
                logger.warning("StellarObjectFactory: Subtype not found on this line!")

    def generate_stellar_object(self, rng: UniformSource) -> StellarObject:
        """Draw a category, then a subtype, then physical properties."""
        category = pick_weighted(self.category_entries, rng)
        subtype = pick_weighted(self.subtype_entries.get(category, []), rng)
        data = self.subtype_database[subtype]
        mass = rng.uniform(data.min_mass, data.max_mass)
        radius = rng.uniform(data.min_radius, data.max_radius)
        temperature = rng.uniform(data.min_temperature, data.max_temperature)
        luminosity = radius**2 * temperature**4 * STEFAN_BOLTZMANN
        return StellarObject(
            category=category,
            subtype=subtype,
            mass=mass,
            radius=radius,
            temperature=temperature,
            luminosity=luminosity,
        )

    def info_category_str(self) -> str:
        """Table of the loaded categories and their weights."""
        lines = ["===== Stellar Categories =====\n"]
        for category, probability in self.category_entries:
            lines.append(
                f"Category: {category_to_string(category):>16}, "
                f"probability: {_g(probability, 4)}\n"
            )
        return "".join(lines)

    def info_subtype_str(self) -> str:
        """Table of the loaded subtypes and their ranges."""
        lines = ["===== Stellar Subtypes =====\n"]
        for subtype in sorted(self.subtype_database, key=_SUBTYPE_ORDER.__getitem__):
            d = self.subtype_database[subtype]
            lines.append(
                f"Category: {category_to_string(d.category):>16}, "
                f"Subtype: {subtype_to_string(d.subtype):>22}, "
                f"Probability: {_g(d.probability, 4)}, "
                f"Mass [solar mass]: [{_g(d.min_mass, 4)}, {_g(d.max_mass, 4)}], "
                f"Radius [km]: [{_g(d.min_radius, 4)}, {_g(d.max_radius, 4)}], "
                f"Temperature [K]: [{_g(d.min_temperature, 4)}, "
                f"{_g(d.max_temperature, 4)}]\n"
            )
        return "".join(lines)