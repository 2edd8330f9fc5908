"""Patterns: named, ordered collections of drafted pieces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator

from .errors import ConstructionError
from .features import HemFeature
from .measurements import PieceOptions
from .outline import add_seam_allowance
from .piece import Piece
from .pipeline import PieceDrafter

__all__ = ["Pattern", "PatternDrafter"]


class Pattern:
    """Ordered pieces of one garment, unique by piece name."""

    def __init__(self, name: str, pieces: Iterable[Piece] = ()) -> None:
        if not name or not name.strip():
            raise ConstructionError("Pattern name must be a non-empty string.")
        self.name = name
        self._pieces: list[Piece] = []
        for piece in pieces:
            self.add_piece(piece)

    @property
    def pieces(self) -> tuple[Piece, ...]:
        return tuple(self._pieces)

    def add_piece(self, piece: Piece) -> Piece:
        if not isinstance(piece, Piece):
            raise ConstructionError(f"Pattern {self.name!r} only accepts Piece instances.")
        if any(existing.name == piece.name for existing in self._pieces):
            raise ConstructionError(f"Pattern {self.name!r} already has a piece named {piece.name!r}.")
        self._pieces.append(piece)
        return piece

    def extend(self, pieces: Iterable[Piece]) -> None:
        for piece in pieces:
            self.add_piece(piece)

    def piece(self, name: str) -> Piece:
        for piece in self._pieces:
            if piece.name == name:
                return piece
        raise KeyError(f"Pattern {self.name!r} has no piece named {name!r}.")

    def with_seam_allowance(self) -> "Pattern":
        """Copy of the pattern with every piece grown by its own allowance."""

        return Pattern(self.name, (add_seam_allowance(piece) for piece in self._pieces))

    def __iter__(self) -> Iterator[Piece]:
        return iter(self._pieces)

    def __len__(self) -> int:
        return len(self._pieces)

    def __repr__(self) -> str:
        return f"Pattern({self.name!r}, pieces={[piece.name for piece in self._pieces]!r})"


class PatternDrafter(ABC):
    """Drafts a complete pattern by combining piece drafters and features.

    ``options_class`` names the options dataclass the drafter expects.
    """

    options_class: type[PieceOptions] = PieceOptions

    def __init__(self, measurements: Any, options: Any = None) -> None:
        self.measurements = measurements
        self.options = options

    @abstractmethod
    def draft_pattern(self) -> Pattern:
        """Return the finished pattern."""

    @staticmethod
    def add_hems(pattern: Pattern, drafter: PieceDrafter, width: float = HemFeature.DEFAULT_WIDTH) -> None:
        """Append a hem piece for every hem line ``drafter`` exposes."""

        for edge in drafter.hem_lines():
            pattern.extend(HemFeature(edge, width).draft())
