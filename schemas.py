# schemas.py
from __future__ import annotations

from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field

# =========================
# Base model configurations
# =========================

class ORMBase(BaseModel):
    """Base for models mapped to SQLAlchemy objects."""
    model_config = ConfigDict(from_attributes=True)

# ======================================================
# Storefront schemas
# ======================================================

class Product(ORMBase):
    id: int
    name: str
    image_url: Optional[str] = None

class ProductPage(BaseModel):
    """One page of search results plus the unbounded match count."""
    products: List[Product] = Field(default_factory=list)
    total_count: int = 0
    page: int = 1
    limit: int = 10
    query: str = ""

    @property
    def total_pages(self) -> int:
        return -(-self.total_count // self.limit)

class PageLink(BaseModel):
    number: int
    href: Optional[str] = None
    active: bool = False

class StatusResponse(BaseModel):
    success: bool
    message: str
