"""
Bill of materials for a machine table and/or enclosure.

compute_bill_of_materials() validates the whole request once, then runs each
registered section calculator whose flag is set. Sections are independent:
one being skipped never stops the others.

The compute_<section>() functions run a single section on its own, with the
same validation and the same "None when not requested" rule.
"""

import logging
from typing import Optional

from .registry import get_calculator, list_calculators
from .types import (
    BillOfMaterialsResult, BOMRequest, DoorConfiguration, DoorResult, EnclosureResult,
    MaterialConfiguration, MountingResult, PanelResult, SectionStatus,
    StructuralDimensions, TableConfiguration, TableResult,
)
from .validation import (
    validate_dimensions, validate_doors, validate_panels, validate_request,
)

logger = logging.getLogger(__name__)


def build_request(
    dims: StructuralDimensions,
    table_config: Optional[TableConfiguration] = None,
    door_config: Optional[DoorConfiguration] = None,
    material_config: Optional[MaterialConfiguration] = None,
) -> BOMRequest:
    """Fold the separate configs into one request. door_config replaces table_config.door_config."""
    table_config = table_config or TableConfiguration()
    if door_config is not None:
        table_config = table_config.model_copy(update={"door_config": door_config})
    return BOMRequest(
        dimensions=dims,
        table_config=table_config,
        material_config=material_config or MaterialConfiguration(),
    )


def calculate_bom(request: BOMRequest) -> BillOfMaterialsResult:
    validate_request(request)

    sections = {}
    results = {}
    warnings = []
    for name in list_calculators():
        calculator = get_calculator(name)
        if not calculator.is_requested(request):
            sections[name] = SectionStatus.NOT_REQUESTED
            continue

        result = calculator.calculate_request(request)
        if result is None:
            reason = calculator.omitted_reason(request)
            logger.warning(reason)
            warnings.append(reason)
            sections[name] = SectionStatus.OMITTED
            continue

        sections[name] = SectionStatus.COMPUTED
        results[name] = result

    return BillOfMaterialsResult(sections=sections, warnings=warnings, **results)


def compute_bill_of_materials(
    dims: StructuralDimensions,
    table_config: Optional[TableConfiguration] = None,
    door_config: Optional[DoorConfiguration] = None,
    material_config: Optional[MaterialConfiguration] = None,
) -> BillOfMaterialsResult:
    """
    Full manifest for one table/enclosure build.

    Raises BOMValidationError (listing every bad field) before any section
    is computed. A valid request always returns a complete manifest.
    """
    return calculate_bom(build_request(dims, table_config, door_config, material_config))


# --- Single sections ---

def _effective(dims: StructuralDimensions, config: TableConfiguration) -> StructuralDimensions:
    return BOMRequest(dimensions=dims, table_config=config).effective_dimensions


def compute_table(dims: StructuralDimensions, config: TableConfiguration) -> Optional[TableResult]:
    if not config.include_table:
        return None
    validate_dimensions(dims)
    return get_calculator("table").calculate(_effective(dims, config))


def compute_enclosure(dims: StructuralDimensions, config: TableConfiguration) -> Optional[EnclosureResult]:
    if not config.include_enclosure:
        return None
    validate_dimensions(dims)
    return get_calculator("enclosure").calculate(_effective(dims, config))


def compute_mounting(config: TableConfiguration) -> Optional[MountingResult]:
    """None unless mounting is requested and both table and enclosure are included."""
    return get_calculator("mounting").calculate(config)


def compute_doors(dims: StructuralDimensions, config: TableConfiguration) -> Optional[DoorResult]:
    if not config.include_doors:
        return None
    validate_doors(dims, config.door_config)
    return get_calculator("doors").calculate(_effective(dims, config), config.door_config)


def compute_panels(
    dims: StructuralDimensions,
    material: MaterialConfiguration,
    config: Optional[TableConfiguration] = None,
) -> Optional[PanelResult]:
    """config only supplies the is_outside_dimension override, as in the full BOM."""
    if not material.include_panels:
        return None
    validate_panels(dims, material)
    return get_calculator("panels").calculate(_effective(dims, config or TableConfiguration()), material)
