"""
Input and result models for the table / enclosure BOM calculators.

Inputs are plain values; range checks live in validation.py so every problem
in a request can be reported together. All models are frozen: a result is
built once per calculation and never changed afterwards.
"""

import enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .catalog import CatalogLookup, DEFAULT_PANEL_THICKNESS_MM


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# --- Inputs ---

class DoorType(str, enum.Enum):
    STANDARD = "STND"
    BIFOLD = "BFLD"
    AWNING = "AWNG"

    @classmethod
    def parse(cls, value) -> "DoorType":
        """Accept a DoorType, its code ("BFLD") or its name ("bifold")."""
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().upper()
        for member in cls:
            if text in (member.value, member.name):
                return member
        raise ValueError("Unknown door type: %r" % value)


class StructuralDimensions(_Frozen):
    """Enclosure/table size in mm. Height is always the full outer height."""
    length: float
    width: float
    height: float
    is_outside_dimension: bool = True


class DoorConfiguration(_Frozen):
    front_door: bool = False
    back_door: bool = False
    left_door: bool = False
    right_door: bool = False
    door_type: str = DoorType.STANDARD.value

    @property
    def active_faces(self) -> List[str]:
        """Faces with a door, in cut-list order."""
        flags = [
            ("Front", self.front_door),
            ("Back", self.back_door),
            ("Left", self.left_door),
            ("Right", self.right_door),
        ]
        return [face for face, on in flags if on]


class PanelConfiguration(_Frozen):
    top: bool = False
    bottom: bool = False
    left: bool = False
    right: bool = False
    back: bool = False
    front: bool = False


class MaterialConfiguration(_Frozen):
    type: str = "corflute-clear-6mm"
    thickness: float = DEFAULT_PANEL_THICKNESS_MM
    include_panels: bool = False
    panel_config: PanelConfiguration = Field(default_factory=PanelConfiguration)


class TableConfiguration(_Frozen):
    include_table: bool = False
    include_enclosure: bool = False
    mount_enclosure_to_table: bool = False
    include_doors: bool = False
    door_config: DoorConfiguration = Field(default_factory=DoorConfiguration)
    # None = use StructuralDimensions.is_outside_dimension as given
    is_outside_dimension: Optional[bool] = None


class BOMRequest(_Frozen):
    """Everything one BOM calculation needs."""
    dimensions: StructuralDimensions
    table_config: TableConfiguration = Field(default_factory=TableConfiguration)
    material_config: MaterialConfiguration = Field(default_factory=MaterialConfiguration)

    @property
    def effective_dimensions(self) -> StructuralDimensions:
        override = self.table_config.is_outside_dimension
        if override is None or override == self.dimensions.is_outside_dimension:
            return self.dimensions
        return self.dimensions.model_copy(update={"is_outside_dimension": override})


# --- Results ---

class ExtrusionCut(_Frozen):
    """One cut length of one profile, with how many pieces to cut."""
    profile: str
    length_mm: float
    quantity: int
    description: str

    @computed_field
    @property
    def total_length_mm(self) -> float:
        return self.length_mm * self.quantity


class PanelCut(_Frozen):
    position: str
    width_mm: float
    height_mm: float
    thickness_mm: float
    notes: str = ""

    @computed_field
    @property
    def area_mm2(self) -> float:
        return self.width_mm * self.height_mm


class TableResult(_Frozen):
    extrusions: List[ExtrusionCut]
    hardware: Dict[str, int]
    total_lengths: Dict[str, float]


class EnclosureResult(_Frozen):
    large_span: bool
    top_profile: str
    bottom_profile: str
    vertical_profile: str
    extrusions: List[ExtrusionCut]
    hardware: Dict[str, int]
    total_lengths: Dict[str, float]
    profile_totals: Dict[str, float]


class MountingResult(_Frozen):
    hardware: Dict[str, int]
    instructions: str


class DoorResult(_Frozen):
    door_type: DoorType
    door_count: int
    hardware: Dict[str, int]
    panels: List[PanelCut]


class PanelResult(_Frozen):
    material_type: str
    thickness_mm: float
    channel_mounted: bool
    panels: List[PanelCut]
    total_area_mm2: float


class SectionStatus(str, enum.Enum):
    NOT_REQUESTED = "not_requested"
    COMPUTED = "computed"
    OMITTED = "omitted"


SECTION_NAMES = ("table", "enclosure", "mounting", "doors", "panels")


class BillOfMaterialsResult(_Frozen):
    """
    The full manifest. A section is None unless its status is COMPUTED;
    `sections` says whether a missing section was never asked for or was
    asked for and skipped (see `warnings` for why).
    """
    table: Optional[TableResult] = None
    enclosure: Optional[EnclosureResult] = None
    mounting: Optional[MountingResult] = None
    doors: Optional[DoorResult] = None
    panels: Optional[PanelResult] = None
    sections: Dict[str, SectionStatus]
    warnings: List[str] = []

    def is_requested(self, name: str) -> bool:
        return self.sections.get(name, SectionStatus.NOT_REQUESTED) != SectionStatus.NOT_REQUESTED

    def line_items(self) -> List[dict]:
        """Flatten into shop rows: section, part, sku, quantity, description."""
        lookup = CatalogLookup()
        rows = []
        for name in SECTION_NAMES:
            section = getattr(self, name)
            if section is None:
                continue
            for cut in getattr(section, "extrusions", []):
                rows.append({
                    "section": name,
                    "part": cut.profile,
                    "sku": lookup.profile_sku(cut.profile),
                    "quantity": cut.quantity,
                    "description": "%s x %.0fmm" % (cut.description, cut.length_mm),
                })
            for part, qty in getattr(section, "hardware", {}).items():
                if qty <= 0:
                    continue
                rows.append({
                    "section": name,
                    "part": part,
                    "sku": part,
                    "quantity": qty,
                    "description": lookup.hardware_description(part),
                })
            if name == "panels":
                sku = lookup.sheet_sku(section.material_type)
                for panel in section.panels:
                    rows.append({
                        "section": name,
                        "part": section.material_type,
                        "sku": sku,
                        "quantity": 1,
                        "description": "%s panel %.0f x %.0fmm" % (
                            panel.position, panel.width_mm, panel.height_mm),
                    })
            elif name == "doors":
                for panel in section.panels:
                    rows.append({
                        "section": name,
                        "part": "door_panel",
                        "sku": "door_panel",
                        "quantity": 1,
                        "description": "%s door panel %.0f x %.0fmm" % (
                            panel.position, panel.width_mm, panel.height_mm),
                    })
        return rows
