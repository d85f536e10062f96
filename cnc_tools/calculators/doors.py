"""
Enclosure door calculator.

Door panels sit in the V-slot of the 2020 frame. Each face opening is the
clear cavity less the slot reduction (slot depth on both sides), then the
door type takes its own clearance. The cavity height runs between the top and
bottom rails, so 2040 top rails on a large span lower every opening by 20mm.

- STANDARD: one panel, 2mm clearance on width and height
- BIFOLD:   two leaf panels per face ("Front (Left)", "Front (Right)"),
            each half the opening width less 3mm
- AWNING:   one panel, top-hinged; 6mm off the height for the hinge

Hardware scales with the number of faces that have a door.
"""

import math

from .base import BaseCalculator
from .catalog import DEFAULT_PANEL_THICKNESS_MM
from .enclosure import EnclosureCalculator
from .types import (
    BOMRequest, DoorConfiguration, DoorResult, DoorType, PanelCut, StructuralDimensions,
)

FRAME_PROFILE = "2020"

STANDARD_CLEARANCE_MM = 2
BIFOLD_LEAF_CLEARANCE_MM = 3
AWNING_TOP_CLEARANCE_MM = 6

DOOR_HARDWARE_PER_DOOR = {
    "HINGE": 2,
    "HANDLE": 1,
    "T_NUT_SLIDING": 8,
    "BUTTON_HEAD_M5_8MM": 8,
    "CORNER_BRACKET": 4,
    "SPRING_LOADED_T_NUT": 15,
}


class DoorCalculator(BaseCalculator):

    section = "doors"

    def is_requested(self, request: BOMRequest) -> bool:
        return request.table_config.include_doors

    def calculate_request(self, request: BOMRequest) -> DoorResult:
        return self.calculate(request.effective_dimensions, request.table_config.door_config)

    def calculate(self, dims: StructuralDimensions, door_config: DoorConfiguration) -> DoorResult:
        door_type = DoorType.parse(door_config.door_type)
        faces = door_config.active_faces

        openings = self.face_openings(dims)
        panels = []
        for face in faces:
            opening_width, opening_height = openings[face]
            panels.extend(self.door_panels(face, opening_width, opening_height, door_type))

        return DoorResult(
            door_type=door_type,
            door_count=len(faces),
            hardware=self.door_hardware(len(faces), door_type),
            panels=panels,
        )

    def face_openings(self, dims: StructuralDimensions) -> dict:
        """(width, height) of the slotted opening on each face."""
        cavity_length, cavity_width, cavity_height = self.internal_cavity(
            dims, FRAME_PROFILE, EnclosureCalculator().top_rail_profile(dims))
        slot_reduction = 2 * self.lookup.slot_depth(FRAME_PROFILE)
        height = cavity_height - slot_reduction
        front_back = cavity_width - slot_reduction
        sides = cavity_length - slot_reduction
        return {
            "Front": (front_back, height),
            "Back": (front_back, height),
            "Left": (sides, height),
            "Right": (sides, height),
        }

    def door_panels(self, face: str, width: float, height: float, door_type: DoorType) -> list:
        if door_type == DoorType.BIFOLD:
            leaf_width = self.round_half_up(width / 2) - BIFOLD_LEAF_CLEARANCE_MM
            leaf_height = height - STANDARD_CLEARANCE_MM
            return [
                self._panel("%s (%s)" % (face, side), leaf_width, leaf_height,
                            "Bi-fold door - %s leaf (fits in V-slot)" % side.lower())
                for side in ("Left", "Right")
            ]
        if door_type == DoorType.AWNING:
            return [self._panel(
                face,
                width - STANDARD_CLEARANCE_MM,
                height - AWNING_TOP_CLEARANCE_MM,
                "Awning door panel - top hinged (fits in V-slot)",
            )]
        return [self._panel(
            face,
            width - STANDARD_CLEARANCE_MM,
            height - STANDARD_CLEARANCE_MM,
            "Standard door panel (fits in V-slot)",
        )]

    def door_hardware(self, door_count: int, door_type: DoorType) -> dict:
        hardware = self.scale_hardware(DOOR_HARDWARE_PER_DOOR, door_count)
        if door_type == DoorType.BIFOLD:
            # Extra hinge per door for the fold, more fixings to join the leaves
            hardware["HINGE"] = 3 * door_count
            hardware["T_NUT_SLIDING"] = math.ceil(hardware["T_NUT_SLIDING"] * 1.5)
            hardware["BUTTON_HEAD_M5_8MM"] = math.ceil(hardware["BUTTON_HEAD_M5_8MM"] * 1.5)
        elif door_type == DoorType.AWNING:
            hardware["HINGE"] = 2 * door_count
            hardware["T_NUT_SLIDING"] = math.ceil(hardware["T_NUT_SLIDING"] * 0.8)
        return hardware

    def _panel(self, position: str, width: float, height: float, notes: str) -> PanelCut:
        return PanelCut(
            position=position,
            width_mm=self.clamp_length(width, "%s door width" % position),
            height_mm=self.clamp_length(height, "%s door height" % position),
            thickness_mm=DEFAULT_PANEL_THICKNESS_MM,
            notes=notes,
        )
