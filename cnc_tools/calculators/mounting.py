"""Enclosure-to-table mounting kit."""

from typing import Optional

from .base import BaseCalculator
from .types import BOMRequest, MountingResult, TableConfiguration

MOUNTING_HARDWARE = {
    "IOCNR_40": 4,
    "T_NUT_SLIDING": 16,
    "CAP_HEAD_M5_8MM": 16,
}

MOUNTING_INSTRUCTIONS = (
    "See section 3.3.2 - Machine Table Mounting in the assembly guide. "
    "Fix one 40 series corner bracket at each corner, joining the enclosure's "
    "bottom 2020 rails to the table's top 2060 frame."
)


class MountingCalculator(BaseCalculator):

    section = "mounting"

    def is_requested(self, request: BOMRequest) -> bool:
        return request.table_config.mount_enclosure_to_table

    def has_prerequisites(self, config: TableConfiguration) -> bool:
        return config.include_table and config.include_enclosure

    def calculate_request(self, request: BOMRequest) -> Optional[MountingResult]:
        return self.calculate(request.table_config)

    def calculate(self, config: TableConfiguration) -> Optional[MountingResult]:
        if not (config.mount_enclosure_to_table and self.has_prerequisites(config)):
            return None
        return MountingResult(
            hardware=dict(MOUNTING_HARDWARE),
            instructions=MOUNTING_INSTRUCTIONS,
        )

    def omitted_reason(self, request: BOMRequest) -> str:
        config = request.table_config
        missing = [
            name for name, included in (
                ("table", config.include_table),
                ("enclosure", config.include_enclosure),
            )
            if not included
        ]
        return (
            "InconsistentComposition: mounting requested without %s; "
            "mounting section omitted" % " and ".join(missing)
        )
