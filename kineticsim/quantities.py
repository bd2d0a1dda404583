"""Simulation state of model parameters and compartments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

__all__ = ["Parameter", "Compartment", "count_including_species"]


def _check_dimensions(length: int, width: int) -> None:
    if length < 0 or width < 0:
        raise ValueError("delay table dimensions must not be negative")


def _new_table(length: int, width: int) -> list[list[float]]:
    _check_dimensions(length, width)
    return [[0.0] * width for _ in range(length)]


def _resize_table(
    table: list[list[float]] | None, length: int, width: int
) -> list[list[float]]:
    _check_dimensions(length, width)
    rows = [] if table is None else table[:length]
    resized = [(row + [0.0] * width)[:width] for row in rows]
    resized.extend([0.0] * width for _ in range(length - len(resized)))
    return resized


@dataclass
class Parameter:
    """A model parameter; its value defaults to 0 when not set."""

    id: str
    initial_value: float | None = None
    constant: bool = True
    depending_rule: Any = None
    value: float = field(init=False)
    temp_value: float = field(init=False)
    k: list[float] = field(init=False)
    prev_val: list[float] = field(init=False)
    prev_k: list[float] = field(init=False)
    delay_val: list[list[float]] | None = field(init=False, default=None)
    delay_val_width: int = field(init=False, default=0)
    delay_val_length: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.value = 0.0 if self.initial_value is None else float(self.initial_value)
        self.temp_value = self.value
        self.k = [0.0] * 6
        self.prev_val = [self.value] * 3
        self.prev_k = [0.0] * 3

    def init_delay_val(self, length: int, width: int) -> None:
        """Create an empty history of length rows of width values."""
        self.delay_val = _new_table(length, width)
        self.delay_val_width = width
        self.delay_val_length = length

    def realloc_delay_val(self, length: int, width: int) -> None:
        """Resize the history, keeping the values that still fit."""
        self.delay_val = _resize_table(self.delay_val, length, width)
        self.delay_val_width = width
        self.delay_val_length = length


@dataclass
class Compartment:
    """A model compartment; its size defaults to 1 when not set."""

    id: str
    size: float | None = None
    constant: bool = True
    depending_rule: Any = None
    value: float = field(init=False)
    temp_value: float = field(init=False)
    k: list[float] = field(init=False)
    prev_val: list[float] = field(init=False)
    prev_k: list[float] = field(init=False)
    including_species: list[Any] = field(init=False)
    delay_val: list[list[float]] | None = field(init=False, default=None)
    delay_val_width: int = field(init=False, default=0)
    delay_val_length: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.value = 1.0 if self.size is None else float(self.size)
        self.temp_value = self.value
        self.k = [0.0] * 6
        self.prev_val = [self.value] * 3
        self.prev_k = [0.0] * 3
        self.including_species = []

    @property
    def num_of_including_species(self) -> int:
        """Number of species registered as living in this compartment."""
        return len(self.including_species)

    def init_delay_val(self, length: int, width: int) -> None:
        """Create an empty history of length rows of width values."""
        self.delay_val = _new_table(length, width)
        self.delay_val_width = width
        self.delay_val_length = length

    def realloc_delay_val(self, length: int, width: int) -> None:
        """Resize the history, keeping the values that still fit."""
        self.delay_val = _resize_table(self.delay_val, length, width)
        self.delay_val_width = width
        self.delay_val_length = length

    def add_including_species(self, species: Any) -> None:
        """Register a species as living in this compartment."""
        self.including_species.append(species)


def count_including_species(
    compartment_id: str, species_compartments: Iterable[str | None]
) -> int:
    """Count the species whose compartment is compartment_id.

    Species without a compartment are given as None and never counted.
    """
    return sum(
        1 for cid in species_compartments if cid is not None and cid == compartment_id
    )