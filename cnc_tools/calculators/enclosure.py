"""
Enclosure frame calculator.

Box frame = top rails + bottom rails (length and width axes) + 4 vertical
corner posts. Profile choice depends on span:

- span < 1500mm: everything is 2020
- span >= 1500mm: top rails are 2040, bottom rails stay 2020
- verticals are 2020 at every size

Hardware follows the profile mix: 2020-to-2020 corners take IOCNR_20, the
2040 top corners take one IOCNR_40 and one IOCNR_60 each.
"""

import logging

from .base import BaseCalculator
from .types import BOMRequest, EnclosureResult, StructuralDimensions

logger = logging.getLogger(__name__)

LARGE_SPAN_THRESHOLD_MM = 1500

WALL_PROFILE = "2020"
LARGE_TOP_PROFILE = "2040"
BOTTOM_PROFILE = "2020"
VERTICAL_PROFILE = "2020"
ENCLOSURE_PROFILES = ("2020", "2040")

RAILS_PER_AXIS = 2
VERTICAL_COUNT = 4

ENCLOSURE_FIXED_HARDWARE = {
    "ANGLE_CORNER_90": 4,
    "T_NUT_SLIDING": 56,
    "CAP_HEAD_M5_8MM": 56,
    "BUTTON_HEAD_M5_8MM": 8,
}

CORNER_HARDWARE_SMALL = {"IOCNR_20": 12, "IOCNR_40": 0, "IOCNR_60": 0}
CORNER_HARDWARE_LARGE = {"IOCNR_20": 4, "IOCNR_40": 4, "IOCNR_60": 4}

# Extra IO bracket fixings on 1.5m+ frames
EXTRA_HARDWARE_LARGE = {
    "T_NUT_SLIDING": 8,
    "CAP_HEAD_M5_8MM": 8,
}


class EnclosureCalculator(BaseCalculator):

    section = "enclosure"

    def is_requested(self, request: BOMRequest) -> bool:
        return request.table_config.include_enclosure

    def calculate_request(self, request: BOMRequest) -> EnclosureResult:
        return self.calculate(request.effective_dimensions)

    def is_large_span(self, dims: StructuralDimensions) -> bool:
        outer_length, outer_width = self.outer_envelope(dims, WALL_PROFILE)
        return max(outer_length, outer_width) >= LARGE_SPAN_THRESHOLD_MM

    def top_rail_profile(self, dims: StructuralDimensions) -> str:
        """Profile of the top rails. Doors and panels size their openings from it too."""
        return LARGE_TOP_PROFILE if self.is_large_span(dims) else WALL_PROFILE

    def calculate(self, dims: StructuralDimensions) -> EnclosureResult:
        outer_length, outer_width = self.outer_envelope(dims, WALL_PROFILE)
        large_span = self.is_large_span(dims)

        top_profile = self.top_rail_profile(dims)
        logger.debug(
            "Enclosure %.0f x %.0f: top=%s bottom=%s vertical=%s",
            outer_length, outer_width, top_profile, BOTTOM_PROFILE, VERTICAL_PROFILE,
        )

        vertical_length = (
            dims.height
            - self.lookup.profile_height(top_profile)
            - self.lookup.profile_height(BOTTOM_PROFILE)
        )

        top_length = self.make_extrusion_cut(top_profile, outer_length, RAILS_PER_AXIS, "Top length rail")
        top_width = self.make_extrusion_cut(top_profile, outer_width, RAILS_PER_AXIS, "Top width rail")
        bottom_length = self.make_extrusion_cut(BOTTOM_PROFILE, outer_length, RAILS_PER_AXIS, "Bottom length rail")
        bottom_width = self.make_extrusion_cut(BOTTOM_PROFILE, outer_width, RAILS_PER_AXIS, "Bottom width rail")
        verticals = self.make_extrusion_cut(VERTICAL_PROFILE, vertical_length, VERTICAL_COUNT, "Vertical corner post")
        extrusions = [top_length, top_width, bottom_length, bottom_width, verticals]

        # Corner brackets depend on the profile mix; the rest is a fixed kit
        hardware = self.add_hardware(
            CORNER_HARDWARE_LARGE if large_span else CORNER_HARDWARE_SMALL,
            ENCLOSURE_FIXED_HARDWARE,
        )
        if large_span:
            hardware = self.add_hardware(hardware, EXTRA_HARDWARE_LARGE)

        return EnclosureResult(
            large_span=large_span,
            top_profile=top_profile,
            bottom_profile=BOTTOM_PROFILE,
            vertical_profile=VERTICAL_PROFILE,
            extrusions=extrusions,
            hardware=hardware,
            total_lengths={
                "top_length": top_length.total_length_mm,
                "top_width": top_width.total_length_mm,
                "bottom_length": bottom_length.total_length_mm,
                "bottom_width": bottom_width.total_length_mm,
                "vertical": verticals.total_length_mm,
            },
            profile_totals=self.profile_totals(extrusions, ENCLOSURE_PROFILES),
        )
