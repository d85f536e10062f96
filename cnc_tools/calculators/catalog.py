"""
Extrusion, sheet material and hardware catalogue for the table/enclosure BOM.

All dimensions in millimetres. Profile keys are the short trade names used in
the BOM ("2020", "2040", ...); ids match the shop's product ids.
"""


# --- Extrusion profiles ---
# width = face the rail is viewed on, height = depth along the load axis
EXTRUSION_PROFILES = {
    "2020": {
        "id": "20x20-20", "name": "20mm x 20mm - 20 series", "sku": "LR-2020-S-1",
        "width": 20, "height": 20, "slot_depth": 6, "slot_width": 6,
    },
    "2040": {
        "id": "20x40-20", "name": "20mm x 40mm - 20 series", "sku": "LR-2040-S-1",
        "width": 20, "height": 40, "slot_depth": 6, "slot_width": 6,
    },
    "2060": {
        "id": "20x60-20", "name": "20mm x 60mm - 20 series", "sku": "LR-2060-S-1",
        "width": 20, "height": 60, "slot_depth": 6, "slot_width": 6,
    },
    "4040": {
        "id": "40x40-40", "name": "40mm x 40mm - 40 series", "sku": "LR-40S-4040-S-1",
        "width": 40, "height": 40, "slot_depth": 10, "slot_width": 8,
    },
    "4080": {
        "id": "40x80-40", "name": "40mm x 80mm - 40 series", "sku": "LR-40S-4080-S-1",
        "width": 40, "height": 80, "slot_depth": 10, "slot_width": 8,
    },
}

# --- Panel sheet stock (2400 x 1200 sheets) ---
SHEET_MATERIALS = {
    "corflute-clear-6mm": {
        "name": "Clear Corflute Sheets - 6mm", "sku": "MAT-CFLU-6-C-240X120", "thickness": 6,
    },
    "corflute-black-6mm": {
        "name": "Black Corflute Sheets - 6mm", "sku": "MAT-CFLU-6-B-240X120", "thickness": 6,
    },
    "polypropylene-bubble-6mm": {
        "name": "Heavy Duty Polypropylene Bubble Board - 6mm - Black",
        "sku": "MAT-BUBL-6-G-240X120", "thickness": 6,
    },
}

DEFAULT_PANEL_THICKNESS_MM = 6

# --- Hardware parts ---
HARDWARE_PARTS = {
    "IOCNR_20": "Inside corner bracket - 20 series",
    "IOCNR_40": "Inside corner bracket - 40 series",
    "IOCNR_60": "Inside corner bracket - 60 series",
    "L_BRACKET_TRIPLE": "Triple L bracket",
    "ANGLE_CORNER_90": "90 degree angle corner",
    "T_NUT_SLIDING": "Sliding T-nut M5",
    "SPRING_LOADED_T_NUT": "Spring loaded T-nut M5",
    "CAP_HEAD_M5_8MM": "Cap head screw M5 x 8mm",
    "BUTTON_HEAD_M5_8MM": "Button head screw M5 x 8mm",
    "LOW_PROFILE_M5_25MM": "Low profile screw M5 x 25mm",
    "FOOT_BRACKETS": "Foot mounting bracket",
    "FEET": "Adjustable foot / castor",
    "HINGE": "Door hinge",
    "HANDLE": "Door handle",
    "CORNER_BRACKET": "Door corner bracket",
}


class CatalogLookup:
    """Read-only access to the catalogue tables above."""

    def get_profile(self, profile: str) -> dict:
        """Return the profile entry, or raise KeyError for an unknown profile."""
        try:
            return EXTRUSION_PROFILES[profile]
        except KeyError:
            raise KeyError(
                "Unknown extrusion profile: %s. Available: %s"
                % (profile, list(EXTRUSION_PROFILES.keys()))
            )

    def profile_width(self, profile: str) -> float:
        return self.get_profile(profile)["width"]

    def profile_height(self, profile: str) -> float:
        return self.get_profile(profile)["height"]

    def slot_depth(self, profile: str) -> float:
        return self.get_profile(profile)["slot_depth"]

    def slot_width(self, profile: str) -> float:
        return self.get_profile(profile)["slot_width"]

    def profile_sku(self, profile: str) -> str:
        return self.get_profile(profile)["sku"]

    def sheet_sku(self, material_type: str) -> str:
        """SKU for a sheet material id; falls back to the id itself for custom stock."""
        entry = SHEET_MATERIALS.get(material_type)
        return entry["sku"] if entry else material_type

    def hardware_description(self, part: str) -> str:
        return HARDWARE_PARTS.get(part, part.replace("_", " ").title())

    def list_profiles(self) -> list:
        return [dict(key=key, **entry) for key, entry in EXTRUSION_PROFILES.items()]

    def list_sheet_materials(self) -> list:
        return [dict(key=key, **entry) for key, entry in SHEET_MATERIALS.items()]
