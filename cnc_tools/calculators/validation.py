"""
Request validation. Runs before any section is computed and reports every
problem at once through BOMValidationError.
"""

import logging
import math

from .errors import BOMValidationError, InvalidDimension, InvalidDoorType
from .types import (
    BOMRequest, DoorConfiguration, DoorType, MaterialConfiguration, StructuralDimensions,
)

logger = logging.getLogger(__name__)

# Largest accepted length, width, height or thickness (100 m)
MAX_DIMENSION_MM = 100_000


def size_error(field: str, value):
    """InvalidDimension for a value that is not a finite size in (0, MAX_DIMENSION_MM], else None."""
    if not (math.isfinite(value) and value > 0):
        return InvalidDimension(field, "must be a finite number greater than 0 (got %r)" % value)
    if value > MAX_DIMENSION_MM:
        return InvalidDimension(field, "must be at most %dmm (got %r)" % (MAX_DIMENSION_MM, value))
    return None


def dimension_errors(dims: StructuralDimensions) -> list:
    errors = [size_error(field, getattr(dims, field)) for field in ("length", "width", "height")]
    return [e for e in errors if e is not None]


def door_type_errors(door_config: DoorConfiguration) -> list:
    try:
        DoorType.parse(door_config.door_type)
    except ValueError:
        return [InvalidDoorType(
            "door_type",
            "must be one of %s (got %r)" % (
                ", ".join("%s/%s" % (m.name, m.value) for m in DoorType),
                door_config.door_type,
            ),
        )]
    return []


def material_errors(material: MaterialConfiguration) -> list:
    if not material.include_panels:
        return []
    error = size_error("thickness", material.thickness)
    return [error] if error is not None else []


def raise_if_errors(errors: list) -> None:
    if errors:
        logger.info("Rejected BOM request: %s", ", ".join(e.field for e in errors))
        raise BOMValidationError(errors)


def validate_dimensions(dims: StructuralDimensions) -> None:
    raise_if_errors(dimension_errors(dims))


def validate_doors(dims: StructuralDimensions, door_config: DoorConfiguration) -> None:
    raise_if_errors(dimension_errors(dims) + door_type_errors(door_config))


def validate_panels(dims: StructuralDimensions, material: MaterialConfiguration) -> None:
    raise_if_errors(dimension_errors(dims) + material_errors(material))


def validate_request(request: BOMRequest) -> None:
    """Check a whole BOM request. Raises BOMValidationError listing every bad field."""
    errors = dimension_errors(request.dimensions)
    errors += door_type_errors(request.table_config.door_config)
    errors += material_errors(request.material_config)
    raise_if_errors(errors)
