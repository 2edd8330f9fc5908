"""T-shirt pattern: torso block, set-in sleeves and hems."""

from __future__ import annotations

from drafting.measurements import BodyMeasurements, PieceOptions, SleeveMeasurements, TorsoMeasurements
from drafting.pattern import Pattern, PatternDrafter

from .sleeve import SleeveDrafter
from .torso import TorsoDrafter

__all__ = ["ShirtDrafter"]


class ShirtDrafter(PatternDrafter):
    """Combine the torso and sleeve drafters into a ``T-Shirt`` pattern."""

    pattern_name = "T-Shirt"

    def __init__(self, measurements: BodyMeasurements, options: PieceOptions | None = None) -> None:
        super().__init__(measurements, options or PieceOptions())
        self.torso_measurements = TorsoMeasurements.from_body(measurements, self.options)

    def draft_pattern(self) -> Pattern:
        pattern = Pattern(self.pattern_name)

        torso = TorsoDrafter(self.torso_measurements, self.options)
        pattern.extend(torso.draft())
        self.add_hems(pattern, torso)

        sleeve = SleeveDrafter(
            SleeveMeasurements(self.measurements, self.torso_measurements.sleeve_length),
            self.options,
            torso.armhole_diagonal,
        )
        pattern.extend(sleeve.draft())
        self.add_hems(pattern, sleeve)
        return pattern
