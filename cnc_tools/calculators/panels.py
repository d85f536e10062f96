"""
Enclosure panel calculator.

Sheets no thicker than the 20 series slot width sit in the extrusion channel
and are cut to the clear cavity less the slot depth on each side. Thicker
sheets cannot enter the slot; they are surface mounted and cut to the cavity.

Face sizes (cavity = frame inside, height measured under the enclosure's
top rails):
    top / bottom   width x length
    left / right   length x height
    back / front   width x height
"""

from .base import BaseCalculator
from .enclosure import EnclosureCalculator
from .types import (
    BOMRequest, MaterialConfiguration, PanelCut, PanelResult, StructuralDimensions,
)

FRAME_PROFILE = "2020"

# Cut-list order
PANEL_FACES = ("top", "bottom", "left", "right", "back", "front")


class PanelCalculator(BaseCalculator):

    section = "panels"

    def is_requested(self, request: BOMRequest) -> bool:
        return request.material_config.include_panels

    def calculate_request(self, request: BOMRequest) -> PanelResult:
        return self.calculate(request.effective_dimensions, request.material_config)

    def is_channel_mounted(self, thickness: float) -> bool:
        return thickness <= self.lookup.slot_width(FRAME_PROFILE)

    def face_sizes(self, dims: StructuralDimensions, thickness: float) -> dict:
        """(width, height) of the panel for every face, selected or not."""
        cavity_length, cavity_width, cavity_height = self.internal_cavity(
            dims, FRAME_PROFILE, EnclosureCalculator().top_rail_profile(dims))
        inset = 2 * self.lookup.slot_depth(FRAME_PROFILE) if self.is_channel_mounted(thickness) else 0
        length = cavity_length - inset
        width = cavity_width - inset
        height = cavity_height - inset
        return {
            "top": (width, length),
            "bottom": (width, length),
            "left": (length, height),
            "right": (length, height),
            "back": (width, height),
            "front": (width, height),
        }

    def calculate(self, dims: StructuralDimensions, material: MaterialConfiguration) -> PanelResult:
        sizes = self.face_sizes(dims, material.thickness)
        channel_mounted = self.is_channel_mounted(material.thickness)
        notes = "Fits in V-slot" if channel_mounted else "Surface mounted over frame"

        panels = []
        for face in PANEL_FACES:
            if not getattr(material.panel_config, face):
                continue
            width, height = sizes[face]
            panels.append(PanelCut(
                position=face.title(),
                width_mm=self.clamp_length(width, "%s panel width" % face),
                height_mm=self.clamp_length(height, "%s panel height" % face),
                thickness_mm=material.thickness,
                notes=notes,
            ))

        return PanelResult(
            material_type=material.type,
            thickness_mm=material.thickness,
            channel_mounted=channel_mounted,
            panels=panels,
            total_area_mm2=sum(p.area_mm2 for p in panels),
        )
