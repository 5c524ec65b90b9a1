"""ORM model for resources (menu/permission tree nodes)."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from sysapi.models.base import Base


class Resource(Base):
    """A node in the resource tree; parent_id points at another resource row."""

    __tablename__ = "resource"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    type = Column(Integer, nullable=False, default=0)
    permission = Column(String(255), nullable=False, default="")
    parent_id = Column(Integer, ForeignKey("resource.id"), nullable=True, index=True)
    icon = Column(String(255), nullable=False, default="")
    url = Column(String(1024), nullable=False, default="")

    parent = relationship("Resource", remote_side=[id], lazy="select")
