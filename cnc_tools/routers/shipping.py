"""
Box shipping endpoints: the standard box list, best single box, multi-box
packing, and the stored shipping items the packer is usually fed from.
"""

import logging
from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from .. import models, schemas
from ..calculators.box_shipping import (
    STANDARD_BOXES, BestBoxResult, MultiBoxPackingResult, ShippingBox, ShippingItem,
    find_best_box, pack_items_into_multiple_boxes,
)
from ..database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/shipping", tags=["shipping"])


def _require_items(items: List[ShippingItem]) -> None:
    if not items:
        raise HTTPException(status_code=400, detail="Request body must be a non-empty list of shipping items")


def _get_active(item_id: int, db: Session) -> models.ShippingItem:
    record = db.query(models.ShippingItem).filter(
        models.ShippingItem.id == item_id,
        models.ShippingItem.deleted_at.is_(None),
    ).first()
    if not record:
        raise HTTPException(status_code=404, detail="Shipping item not found")
    return record


def _to_schema(record: models.ShippingItem) -> ShippingItem:
    return ShippingItem(
        id=record.id,
        name=record.name,
        sku=record.sku or "",
        length=record.length,
        width=record.width,
        height=record.height,
        weight=record.weight,
        quantity=record.quantity,
    )


# --- Packing ---

@router.get("/boxes", response_model=List[ShippingBox])
def list_boxes():
    return STANDARD_BOXES


@router.post("/calculate-best-box", response_model=BestBoxResult)
def calculate_best_box(items: List[ShippingItem]):
    _require_items(items)
    return find_best_box(items)


@router.post("/pack-multiple-boxes", response_model=MultiBoxPackingResult)
def pack_multiple_boxes(items: List[ShippingItem]):
    _require_items(items)
    return pack_items_into_multiple_boxes(items)


# --- Stored items ---

@router.get("/items", response_model=List[ShippingItem])
def list_items(db: Session = Depends(get_db)):
    records = db.query(models.ShippingItem).filter(
        models.ShippingItem.deleted_at.is_(None)
    ).order_by(models.ShippingItem.id).all()
    return [_to_schema(r) for r in records]


@router.post("/items", response_model=ShippingItem)
def create_item(item: ShippingItem, db: Session = Depends(get_db)):
    record = models.ShippingItem(**item.model_dump(exclude={"id"}))
    db.add(record)
    db.commit()
    db.refresh(record)
    logger.info("Added shipping item %d (%s)", record.id, record.name)
    return _to_schema(record)


@router.patch("/items/{item_id}", response_model=ShippingItem)
def update_item(item_id: int, update: schemas.ShippingItemUpdate, db: Session = Depends(get_db)):
    record = _get_active(item_id, db)
    changes = update.model_dump(exclude_unset=True)
    cleared = [field for field, value in changes.items() if value is None]
    if cleared:
        raise HTTPException(status_code=400, detail="Cannot clear: %s" % ", ".join(cleared))
    for field, value in changes.items():
        setattr(record, field, value)
    db.commit()
    db.refresh(record)
    return _to_schema(record)


@router.delete("/items/{item_id}")
def delete_item(item_id: int, db: Session = Depends(get_db)):
    record = _get_active(item_id, db)
    record.deleted_at = datetime.utcnow()
    db.commit()
    logger.info("Soft-deleted shipping item %d", item_id)
    return {"ok": True, "id": item_id}
