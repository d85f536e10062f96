"""
Abstract base class for the table / enclosure section calculators.

Input: BOMRequest (dimensions + table config + material config)
Output: one section result model, or None when the section cannot be built
"""

import logging
import math
from abc import ABC, abstractmethod

from .catalog import CatalogLookup
from .types import BOMRequest, ExtrusionCut, StructuralDimensions

logger = logging.getLogger(__name__)


class BaseCalculator(ABC):
    """All section calculators inherit from this."""

    # Key of this calculator's section in BillOfMaterialsResult
    section = ""

    def __init__(self) -> None:
        self.lookup = CatalogLookup()

    @abstractmethod
    def is_requested(self, request: BOMRequest) -> bool:
        """True when the request's flags ask for this section."""
        pass

    @abstractmethod
    def calculate_request(self, request: BOMRequest):
        """
        Build this section from a validated request.
        Returns None only when a prerequisite section is missing.
        """
        pass

    def omitted_reason(self, request: BOMRequest) -> str:
        """Warning text used when calculate_request() returns None."""
        return "%s section omitted" % self.section

    # --- Helper methods for all calculators ---

    def outer_envelope(self, dims: StructuralDimensions, wall_profile: str) -> tuple:
        """
        Outer (length, width) of a frame built from wall_profile.
        Inside dimensions grow by one profile width on each side.
        """
        if dims.is_outside_dimension:
            return dims.length, dims.width
        wall = self.lookup.profile_width(wall_profile)
        return dims.length + 2 * wall, dims.width + 2 * wall

    def internal_cavity(self, dims: StructuralDimensions, wall_profile: str,
                        top_profile: str = None) -> tuple:
        """
        Clear (length, width, height) inside a frame built from wall_profile.
        Height is always an outside measurement; the clear height sits between
        the top rails (top_profile, default wall_profile) and the bottom rails.
        """
        wall = self.lookup.profile_width(wall_profile)
        height = (
            dims.height
            - self.lookup.profile_height(top_profile or wall_profile)
            - self.lookup.profile_height(wall_profile)
        )
        if dims.is_outside_dimension:
            return dims.length - 2 * wall, dims.width - 2 * wall, height
        return dims.length, dims.width, height

    def clamp_length(self, value: float, label: str) -> float:
        """Derived lengths never go negative; a clamp means the input was too small to build."""
        if value < 0:
            logger.warning("%s: derived %s is %.1fmm, clamped to 0", self.section, label, value)
            return 0.0
        return value

    def round_half_up(self, value: float) -> int:
        return int(math.floor(value + 0.5))

    def scale_hardware(self, per_unit: dict, count: int) -> dict:
        """Multiply every part count in a per-unit hardware table."""
        return {part: qty * count for part, qty in per_unit.items()}

    def add_hardware(self, base: dict, extra: dict) -> dict:
        """Sum two hardware tables without mutating either."""
        combined = dict(base)
        for part, qty in extra.items():
            combined[part] = combined.get(part, 0) + qty
        return combined

    def make_extrusion_cut(self, profile: str, length_mm: float, quantity: int,
                           description: str) -> ExtrusionCut:
        self.lookup.get_profile(profile)  # KeyError on a profile not in the catalogue
        return ExtrusionCut(
            profile=profile,
            length_mm=self.clamp_length(length_mm, description),
            quantity=quantity,
            description=description,
        )

    def profile_totals(self, cuts: list, profiles: tuple) -> dict:
        """Total cut length per profile. Every profile in `profiles` gets a key, used or not."""
        totals = {profile: 0.0 for profile in profiles}
        for cut in cuts:
            totals[cut.profile] = totals.get(cut.profile, 0.0) + cut.total_length_mm
        return totals
