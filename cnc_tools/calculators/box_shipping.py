"""
Box shipping calculator.

Picks shipping boxes for a list of items with an extreme-point 3D bin
packing heuristic:

- every item unit is tried at each free corner ("extreme point") of a box,
  in all six orientations, first fit wins
- boxes are tried in preference order: smallest volume first, with a
  penalty on long boxes so a 3m tube is only used when an item needs it

find_best_box() looks for one box that takes everything.
pack_items_into_multiple_boxes() falls back to several boxes, and reports
items no standard box can take.

Box axes: x runs across the box width, y up its height, z along its length.
Dimensions in mm, weights in grams.
"""

import logging
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

# Box preference scoring
MAX_PREFERRED_LENGTH_MM = 1200
LENGTH_PENALTY_FACTOR = 1.5
EXTREME_LENGTH_THRESHOLD_MM = 1500
EXTREME_LENGTH_PENALTY_FACTOR = 10.0


class ShippingBox(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    length: float
    width: float
    height: float
    max_weight: float


class ShippingItem(BaseModel):
    """One product line to ship. quantity units of it are packed separately."""
    id: Optional[int] = None
    name: str
    sku: str = ""
    length: float = Field(gt=0, allow_inf_nan=False)
    width: float = Field(gt=0, allow_inf_nan=False)
    height: float = Field(gt=0, allow_inf_nan=False)
    weight: float = Field(ge=0, allow_inf_nan=False)
    quantity: int = Field(default=1, ge=1)


class PackedItem(BaseModel):
    """Where one unit sits: position is its (x, y, z) corner, size its rotated (x, y, z) extent."""
    item: ShippingItem
    position: Tuple[float, float, float]
    rotation: int
    size: Tuple[float, float, float]


class BestBoxResult(BaseModel):
    success: bool
    box: Optional[ShippingBox] = None
    packed_items: List[ShippingItem] = []
    unfit_items: List[ShippingItem] = []
    placements: List[PackedItem] = []


class Shipment(BaseModel):
    box: ShippingBox
    packed_items: List[ShippingItem]
    placements: List[PackedItem] = []


class MultiBoxPackingResult(BaseModel):
    success: bool
    shipments: List[Shipment] = []
    unfit_items: List[ShippingItem] = []


STANDARD_BOXES = [
    ShippingBox(id="padded satchel", name="Padded Satchel", length=100, width=80, height=20, max_weight=300),
    ShippingBox(id="small satchel", name="Small Satchel", length=240, width=150, height=100, max_weight=5000),
    ShippingBox(id="small", name="Small Box", length=190, width=150, height=100, max_weight=25000),
    ShippingBox(id="medium", name="Medium Box", length=290, width=290, height=190, max_weight=25000),
    ShippingBox(id="bigger", name="Bigger Box", length=440, width=340, height=240, max_weight=25000),
    ShippingBox(id="large", name="Large Box", length=500, width=100, height=100, max_weight=25000),
    ShippingBox(id="extra large", name="Extra Large Box", length=1150, width=100, height=100, max_weight=25000),
    ShippingBox(id="xxl", name="XXL Box", length=1570, width=100, height=100, max_weight=25000),
    ShippingBox(id="3m box", name="3m Box", length=3050, width=150, height=150, max_weight=25000),
]


# --- Geometry ---

def item_orientations(item: ShippingItem) -> List[Tuple[float, float, float]]:
    """The six axis-aligned (x, y, z) extents of an item, index = rotation."""
    l, w, h = item.length, item.width, item.height
    return [(w, h, l), (l, h, w), (w, l, h), (h, w, l), (l, w, h), (h, l, w)]


def _overlaps(a_pos, a_size, b_pos, b_size) -> bool:
    return all(
        a_pos[axis] < b_pos[axis] + b_size[axis] and a_pos[axis] + a_size[axis] > b_pos[axis]
        for axis in range(3)
    )


class PackingBox:
    """A box being filled: placed units, free corners and weight left."""

    def __init__(self, box: ShippingBox) -> None:
        self.box = box
        self.placements: List[PackedItem] = []
        self.extreme_points = [(0.0, 0.0, 0.0)]
        self.remaining_weight = box.max_weight

    def fits_at(self, position: tuple, size: tuple) -> bool:
        x, y, z = position
        w, h, d = size
        if x + w > self.box.width or y + h > self.box.height or z + d > self.box.length:
            return False
        return not any(_overlaps(position, size, p.position, p.size) for p in self.placements)

    def try_pack(self, item: ShippingItem) -> bool:
        """Place one unit at the first free corner and orientation that fits."""
        if item.weight > self.remaining_weight:
            return False
        orientations = item_orientations(item)
        for point in self.extreme_points:
            for rotation, size in enumerate(orientations):
                if self.fits_at(point, size):
                    placed = PackedItem(item=item, position=point, rotation=rotation, size=size)
                    self.placements.append(placed)
                    self.remaining_weight -= item.weight
                    self._update_extreme_points(placed)
                    return True
        return False

    def _update_extreme_points(self, placed: PackedItem) -> None:
        x, y, z = placed.position
        w, h, d = placed.size
        points = [(x, y + h, z), (x + w, y, z), (x, y, z + d)]
        for px, py, pz in self.extreme_points:
            if x <= px < x + w and y <= py < y + h and z <= pz < z + d:
                continue  # now inside the new unit
            points.append((px, py, pz))
        # lowest first, then leftmost, then nearest
        self.extreme_points = sorted(set(points), key=lambda p: (p[1], p[0], p[2]))

    @property
    def packed_items(self) -> List[ShippingItem]:
        return [p.item for p in self.placements]


# --- Box choice ---

def box_preference(box: ShippingBox, longest_item_mm: float = 0) -> float:
    """Lower is better: box volume, scaled up for long boxes."""
    volume = box.length * box.width * box.height
    if box.length > EXTREME_LENGTH_THRESHOLD_MM and longest_item_mm < EXTREME_LENGTH_THRESHOLD_MM:
        return volume * (box.length / EXTREME_LENGTH_THRESHOLD_MM) ** EXTREME_LENGTH_PENALTY_FACTOR
    if box.length > MAX_PREFERRED_LENGTH_MM:
        return volume * (box.length / MAX_PREFERRED_LENGTH_MM) ** LENGTH_PENALTY_FACTOR
    return volume


def expand_items(items: List[ShippingItem]) -> List[ShippingItem]:
    """One entry per physical unit."""
    return [item for item in items for _ in range(item.quantity)]


def longest_dimension(items: List[ShippingItem]) -> float:
    return max((max(i.length, i.width, i.height) for i in items), default=0)


def boxes_by_preference(items: List[ShippingItem], boxes: List[ShippingBox] = None) -> List[ShippingBox]:
    longest = longest_dimension(items)
    return sorted(boxes or STANDARD_BOXES, key=lambda b: box_preference(b, longest))


def find_best_box(items: List[ShippingItem], boxes: List[ShippingBox] = None) -> BestBoxResult:
    """The most preferred single box that takes every unit, or success=False."""
    boxes = boxes or STANDARD_BOXES
    units = expand_items(items)
    if not units:
        return BestBoxResult(success=True, box=boxes[0])

    for box in boxes_by_preference(units, boxes):
        packing = PackingBox(box)
        if all(packing.try_pack(unit) for unit in units):
            logger.debug("%d unit(s) fit in %s", len(units), box.name)
            return BestBoxResult(
                success=True,
                box=box,
                packed_items=packing.packed_items,
                placements=packing.placements,
            )

    logger.debug("No single box takes all %d unit(s)", len(units))
    return BestBoxResult(success=False, unfit_items=units)


def pack_items_into_multiple_boxes(items: List[ShippingItem],
                                   boxes: List[ShippingBox] = None) -> MultiBoxPackingResult:
    """
    Ship everything in as few, small boxes as possible.

    One box is used when one box takes everything, unless that box is an
    extra-long one the items do not need; then the units are spread over
    several boxes, largest unit first, each into the first open box that
    takes it or else a new box.
    """
    boxes = boxes or STANDARD_BOXES
    units = expand_items(items)
    if not units:
        return MultiBoxPackingResult(success=True)

    single = find_best_box(items, boxes)
    if single.success:
        needs_long_box = longest_dimension(units) >= EXTREME_LENGTH_THRESHOLD_MM
        if single.box.length < EXTREME_LENGTH_THRESHOLD_MM or needs_long_box:
            return MultiBoxPackingResult(
                success=True,
                shipments=[Shipment(box=single.box, packed_items=single.packed_items,
                                    placements=single.placements)],
            )

    units = sorted(units, key=lambda u: u.length * u.width * u.height, reverse=True)
    candidates = boxes_by_preference(units, boxes)
    open_boxes: List[PackingBox] = []
    unfit = []
    for unit in units:
        if any(packing.try_pack(unit) for packing in open_boxes):
            continue
        for box in candidates:
            packing = PackingBox(box)
            if packing.try_pack(unit):
                open_boxes.append(packing)
                break
        else:
            logger.info("No standard box takes %s", unit.name)
            unfit.append(unit)

    return MultiBoxPackingResult(
        success=not unfit,
        shipments=[
            Shipment(box=p.box, packed_items=p.packed_items, placements=p.placements)
            for p in open_boxes
        ],
        unfit_items=unfit,
    )
