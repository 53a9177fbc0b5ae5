import uuid

from sqlalchemy import Column, DateTime, String, func
from sqlalchemy.orm import relationship

from storeadmin.db import Base


class Store(Base):
    __tablename__ = "stores"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(256), nullable=False)
    user_id = Column(String(128), nullable=False, index=True)  # owning identity
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    categories = relationship("Category", back_populates="store", cascade="all, delete-orphan")
    sizes = relationship("Size", back_populates="store", cascade="all, delete-orphan")
    colors = relationship("Color", back_populates="store", cascade="all, delete-orphan")
    products = relationship("Product", back_populates="store", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Store id={self.id} name={self.name}>"
