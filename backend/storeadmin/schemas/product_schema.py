# backend/storeadmin/schemas/product_schema.py
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        from_attributes=True, populate_by_name=True, alias_generator=to_camel
    )


class ImageIn(CamelModel):
    url: str


class ProductFormValues(CamelModel):
    """Shape and constraints of a product record as edited in the dashboard."""

    name: str = Field(min_length=1)
    image: List[ImageIn]
    price: float = Field(ge=1)
    category_id: str = Field(min_length=1)
    size_id: str = Field(min_length=1)
    color_id: str = Field(min_length=1)
    is_featured: bool = False
    is_archived: bool = False

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


def field_errors(exc: ValidationError) -> Dict[str, str]:
    """Map a pydantic ValidationError to {wire field name: first message}."""
    errors: Dict[str, str] = {}
    for err in exc.errors():
        loc = err.get("loc") or ("__root__",)
        errors.setdefault(str(loc[0]), err["msg"])
    return errors


class ImageOut(CamelModel):
    id: str
    product_id: str
    url: str
    created_at: Optional[datetime] = None


class OptionOut(CamelModel):
    id: str
    store_id: str
    name: str
    value: Optional[str] = None


class StoreOut(CamelModel):
    id: str
    name: str
    user_id: str
    created_at: Optional[datetime] = None


class ProductOut(CamelModel):
    id: str
    store_id: str
    name: str
    price: float
    category_id: str
    size_id: str
    color_id: str
    is_featured: bool
    is_archived: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    image: List[ImageOut] = Field(default_factory=list, validation_alias="images")


class ProductDetailOut(ProductOut):
    category: Optional[OptionOut] = None
    size: Optional[OptionOut] = None
    color: Optional[OptionOut] = None


def dump(model_cls, obj) -> dict:
    """Serialize an ORM object to camelCase JSON-ready data."""
    return model_cls.model_validate(obj).model_dump(by_alias=True, mode="json")
