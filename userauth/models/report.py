"""ORM model for price reports owned by a user."""

from sqlalchemy import Boolean, Column, Float, ForeignKey, Integer, String, false
from sqlalchemy.orm import relationship

from userauth.models.base import Base


class Report(Base):
    """A vehicle price report. Each report belongs to exactly one user."""

    __tablename__ = "reports"

    id = Column(Integer, primary_key=True, autoincrement=True)
    price = Column(Integer, nullable=False)
    make = Column(String(255), nullable=False)
    model = Column(String(255), nullable=False)
    year = Column(Integer, nullable=False)
    mileage = Column(Integer, nullable=False)
    lng = Column(Float, nullable=False)
    lat = Column(Float, nullable=False)
    approved = Column(Boolean, nullable=False, default=False, server_default=false())
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user = relationship("User", back_populates="reports")
