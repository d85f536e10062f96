"""
CNC table / enclosure calculator endpoints.

Each section can be calculated on its own, or all together through
/cnc/calculate-bom. Invalid input comes back as 422 with every bad field
listed (see exceptions.py).
"""

from fastapi import APIRouter

from ..calculators import (
    BOMRequest, StructuralDimensions, TableConfiguration,
    calculate_bom, compute_doors, compute_enclosure, compute_mounting, compute_panels,
    compute_table,
)
from ..calculators.catalog import CatalogLookup
from ..calculators.types import DoorResult, EnclosureResult, MountingResult, PanelResult, TableResult
from ..schemas import BOMResponse, DoorMaterialsRequest, PanelMaterialsRequest

router = APIRouter(prefix="/cnc", tags=["cnc"])

lookup = CatalogLookup()


@router.post("/calculate-table-materials", response_model=TableResult)
def calculate_table_materials(dimensions: StructuralDimensions):
    return compute_table(dimensions, TableConfiguration(include_table=True))


@router.post("/calculate-enclosure-materials", response_model=EnclosureResult)
def calculate_enclosure_materials(dimensions: StructuralDimensions):
    return compute_enclosure(dimensions, TableConfiguration(include_enclosure=True))


@router.get("/calculate-mounting-materials", response_model=MountingResult)
def calculate_mounting_materials():
    return compute_mounting(TableConfiguration(
        include_table=True,
        include_enclosure=True,
        mount_enclosure_to_table=True,
    ))


@router.post("/calculate-door-materials", response_model=DoorResult)
def calculate_door_materials(request: DoorMaterialsRequest):
    config = TableConfiguration(include_doors=True, door_config=request.door_config)
    return compute_doors(request.dimensions, config)


@router.post("/calculate-panel-materials", response_model=PanelResult)
def calculate_panel_materials(request: PanelMaterialsRequest):
    material = request.material_config.model_copy(update={"include_panels": True})
    return compute_panels(request.dimensions, material)


@router.post("/calculate-bom", response_model=BOMResponse)
def calculate_bill_of_materials(request: BOMRequest):
    """Full BOM: every requested section plus a flat line-item list."""
    return BOMResponse.from_result(calculate_bom(request))


@router.get("/extrusions")
def list_extrusions():
    return lookup.list_profiles()


@router.get("/materials")
def list_sheet_materials():
    return lookup.list_sheet_materials()
