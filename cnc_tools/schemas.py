from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from .calculators.types import (
    BillOfMaterialsResult, BOMRequest, DoorConfiguration, MaterialConfiguration,
    StructuralDimensions,
)


class DoorMaterialsRequest(BaseModel):
    dimensions: StructuralDimensions
    door_config: DoorConfiguration = DoorConfiguration()


class PanelMaterialsRequest(BaseModel):
    dimensions: StructuralDimensions
    material_config: MaterialConfiguration = MaterialConfiguration()


class BOMLineItem(BaseModel):
    section: str
    part: str
    sku: str
    quantity: int
    description: str


class BOMResponse(BaseModel):
    bom: BillOfMaterialsResult
    line_items: List[BOMLineItem] = []

    @classmethod
    def from_result(cls, result: BillOfMaterialsResult) -> "BOMResponse":
        return cls(bom=result, line_items=result.line_items())


class SavedCalculationCreate(BaseModel):
    name: str
    notes: Optional[str] = None
    request: BOMRequest


class SavedCalculationUpdate(BaseModel):
    name: Optional[str] = None
    notes: Optional[str] = None


class SavedCalculation(BaseModel):
    id: int
    name: str
    notes: Optional[str] = None
    request: BOMRequest
    result: BillOfMaterialsResult
    created_at: datetime
    updated_at: datetime


class ShippingItemUpdate(BaseModel):
    name: Optional[str] = None
    sku: Optional[str] = None
    length: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)
    width: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)
    height: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)
    weight: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    quantity: Optional[int] = Field(default=None, ge=1)
