"""
Machine table calculator.

Frame = 2060 rails (top frame + lower support, both axes) on four 4040 legs.
Hardware is a fixed kit per table.
"""

from .base import BaseCalculator
from .types import BOMRequest, StructuralDimensions, TableResult

RAIL_PROFILE = "2060"
LEG_PROFILE = "4040"

# Foot bracket plate + levelling foot sit under each leg
TABLE_FOOT_OFFSET_MM = 40

RAILS_PER_AXIS = 4  # 2 top frame + 2 lower support
LEG_COUNT = 4

TABLE_HARDWARE = {
    "IOCNR_60": 8,
    "L_BRACKET_TRIPLE": 16,
    "T_NUT_SLIDING": 144,
    "CAP_HEAD_M5_8MM": 48,
    "BUTTON_HEAD_M5_8MM": 96,
    "LOW_PROFILE_M5_25MM": 16,
    "FOOT_BRACKETS": 4,
    "FEET": 4,
}


class TableCalculator(BaseCalculator):

    section = "table"

    def is_requested(self, request: BOMRequest) -> bool:
        return request.table_config.include_table

    def calculate_request(self, request: BOMRequest) -> TableResult:
        return self.calculate(request.effective_dimensions)

    def calculate(self, dims: StructuralDimensions) -> TableResult:
        # Inside dimensions are the working area between the legs
        rail_length, rail_width = self.outer_envelope(dims, LEG_PROFILE)
        leg_length = dims.height - TABLE_FOOT_OFFSET_MM

        extrusions = [
            self.make_extrusion_cut(RAIL_PROFILE, rail_length, RAILS_PER_AXIS, "Table length rail"),
            self.make_extrusion_cut(RAIL_PROFILE, rail_width, RAILS_PER_AXIS, "Table width rail"),
            self.make_extrusion_cut(LEG_PROFILE, leg_length, LEG_COUNT, "Table leg"),
        ]

        return TableResult(
            extrusions=extrusions,
            hardware=dict(TABLE_HARDWARE),
            total_lengths=self.profile_totals(extrusions, (RAIL_PROFILE, LEG_PROFILE)),
        )
