import uuid

from sqlalchemy import Column, DateTime, ForeignKey, String, func
from sqlalchemy.orm import relationship

from storeadmin.db import Base


def _uuid() -> str:
    return str(uuid.uuid4())


class Category(Base):
    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=_uuid)
    store_id = Column(
        String(36), ForeignKey("stores.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(256), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    store = relationship("Store", back_populates="categories")


class Size(Base):
    __tablename__ = "sizes"

    id = Column(String(36), primary_key=True, default=_uuid)
    store_id = Column(
        String(36), ForeignKey("stores.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(256), nullable=False)
    value = Column(String(64), nullable=False)  # e.g. "XL"
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    store = relationship("Store", back_populates="sizes")


class Color(Base):
    __tablename__ = "colors"

    id = Column(String(36), primary_key=True, default=_uuid)
    store_id = Column(
        String(36), ForeignKey("stores.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(256), nullable=False)
    value = Column(String(64), nullable=False)  # hex, e.g. "#ff0000"
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    store = relationship("Store", back_populates="colors")
