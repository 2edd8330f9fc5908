"""Joggers pattern: trouser block with hem bands."""

from __future__ import annotations

from drafting.measurements import BodyMeasurements, PantMeasurements, PantOptions
from drafting.pattern import Pattern, PatternDrafter

from .pant import PantDrafter

__all__ = ["JoggersDrafter"]


class JoggersDrafter(PatternDrafter):
    options_class = PantOptions
    pattern_name = "Pant"

    def __init__(self, measurements: BodyMeasurements, options: PantOptions | None = None) -> None:
        super().__init__(measurements, options or PantOptions())

    def draft_pattern(self) -> Pattern:
        pattern = Pattern(self.pattern_name)
        pant = PantDrafter(PantMeasurements(self.measurements), self.options)
        pattern.extend(pant.draft())
        self.add_hems(pattern, pant)
        return pattern
