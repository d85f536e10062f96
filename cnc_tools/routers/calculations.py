"""
Saved calculations: store a finished BOM and fetch it back later.

POST computes the BOM from the submitted request before saving, so a stored
record always holds a valid manifest. DELETE is a soft delete.
"""

import logging
from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from .. import models, schemas
from ..calculators import calculate_bom
from ..database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculations", tags=["calculations"])


def _get_active(calculation_id: int, db: Session) -> models.SavedCalculation:
    record = db.query(models.SavedCalculation).filter(
        models.SavedCalculation.id == calculation_id,
        models.SavedCalculation.deleted_at.is_(None),
    ).first()
    if not record:
        raise HTTPException(status_code=404, detail="Calculation not found")
    return record


def _to_schema(record: models.SavedCalculation) -> schemas.SavedCalculation:
    return schemas.SavedCalculation(
        id=record.id,
        name=record.name,
        notes=record.notes,
        request=record.request_json,
        result=record.result_json,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


@router.post("/", response_model=schemas.SavedCalculation)
def create_calculation(payload: schemas.SavedCalculationCreate, db: Session = Depends(get_db)):
    result = calculate_bom(payload.request)
    record = models.SavedCalculation(
        name=payload.name,
        notes=payload.notes,
        request_json=payload.request.model_dump(mode="json"),
        result_json=result.model_dump(mode="json"),
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    logger.info("Saved calculation %d (%s)", record.id, record.name)
    return _to_schema(record)


@router.get("/", response_model=List[schemas.SavedCalculation])
def list_calculations(db: Session = Depends(get_db)):
    records = db.query(models.SavedCalculation).filter(
        models.SavedCalculation.deleted_at.is_(None)
    ).order_by(models.SavedCalculation.id).all()
    return [_to_schema(r) for r in records]


@router.get("/{calculation_id}", response_model=schemas.SavedCalculation)
def get_calculation(calculation_id: int, db: Session = Depends(get_db)):
    return _to_schema(_get_active(calculation_id, db))


@router.patch("/{calculation_id}", response_model=schemas.SavedCalculation)
def update_calculation(calculation_id: int, update: schemas.SavedCalculationUpdate,
                       db: Session = Depends(get_db)):
    record = _get_active(calculation_id, db)
    changes = update.model_dump(exclude_unset=True)
    # notes may be cleared with null; a name is required
    if "name" in changes and not changes["name"]:
        raise HTTPException(status_code=400, detail="name cannot be empty")
    for field, value in changes.items():
        setattr(record, field, value)
    db.commit()
    db.refresh(record)
    return _to_schema(record)


@router.delete("/{calculation_id}")
def delete_calculation(calculation_id: int, db: Session = Depends(get_db)):
    record = _get_active(calculation_id, db)
    record.deleted_at = datetime.utcnow()
    db.commit()
    logger.info("Soft-deleted calculation %d", calculation_id)
    return {"ok": True, "id": calculation_id}
