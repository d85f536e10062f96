"""
Calculator registry. Maps BOM section names to calculator classes.

Order matters: sections are computed and reported in registry order.
"""

from .base import BaseCalculator
from .doors import DoorCalculator
from .enclosure import EnclosureCalculator
from .mounting import MountingCalculator
from .panels import PanelCalculator
from .table import TableCalculator

CALCULATOR_REGISTRY: dict[str, type] = {
    "table": TableCalculator,
    "enclosure": EnclosureCalculator,
    "mounting": MountingCalculator,
    "doors": DoorCalculator,
    "panels": PanelCalculator,
}


def get_calculator(section: str) -> BaseCalculator:
    """Returns an instance of the calculator for a section, or raises ValueError."""
    if section not in CALCULATOR_REGISTRY:
        raise ValueError(
            f"No calculator registered for section: {section}. "
            f"Available: {list(CALCULATOR_REGISTRY.keys())}"
        )
    return CALCULATOR_REGISTRY[section]()


def has_calculator(section: str) -> bool:
    return section in CALCULATOR_REGISTRY


def list_calculators() -> list[str]:
    """List all registered section names, in computation order."""
    return list(CALCULATOR_REGISTRY.keys())
