"""
Table / enclosure bill-of-materials engine.

Pure Python math. No I/O, no shared state.
Given the structural dimensions, table config and material config, produce
extrusion cut lengths, hardware counts and panel cut sizes.
"""

from .bill_of_materials import (
    build_request,
    calculate_bom,
    compute_bill_of_materials,
    compute_doors,
    compute_enclosure,
    compute_mounting,
    compute_panels,
    compute_table,
)
from .errors import BOMValidationError, CalculatorInputError, InvalidDimension, InvalidDoorType
from .types import (
    BillOfMaterialsResult,
    BOMRequest,
    DoorConfiguration,
    DoorType,
    MaterialConfiguration,
    PanelConfiguration,
    SectionStatus,
    StructuralDimensions,
    TableConfiguration,
)

__all__ = [
    "build_request", "calculate_bom", "compute_bill_of_materials",
    "compute_doors", "compute_enclosure", "compute_mounting", "compute_panels", "compute_table",
    "BOMValidationError", "CalculatorInputError", "InvalidDimension", "InvalidDoorType",
    "BillOfMaterialsResult", "BOMRequest", "DoorConfiguration", "DoorType",
    "MaterialConfiguration", "PanelConfiguration", "SectionStatus",
    "StructuralDimensions", "TableConfiguration",
]
