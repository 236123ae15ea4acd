"""Declarative models shared by the unit and integration tests."""

from __future__ import annotations

from typing import Any

from sqlalchemy import ForeignKey
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from jsonb_query import JsonbQueryMixin


class Base(DeclarativeBase):
    pass


class ProductCategory(JsonbQueryMixin, Base):
    __tablename__ = "product_categories"

    id: Mapped[int] = mapped_column(primary_key=True)
    options: Mapped[dict[str, Any]] = mapped_column(JSONB, default=dict)
    products: Mapped[list[Product]] = relationship(back_populates="product_category")


class Product(JsonbQueryMixin, Base):
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(primary_key=True)
    options: Mapped[dict[str, Any]] = mapped_column(JSONB, default=dict)
    product_category_id: Mapped[int | None] = mapped_column(
        ForeignKey("product_categories.id"), nullable=True
    )
    product_category: Mapped[ProductCategory | None] = relationship(
        back_populates="products"
    )
