"""ORM model for application users (session auth)."""

from sqlalchemy import Boolean, Column, Integer, String, false
from sqlalchemy.orm import relationship

from userauth.models.base import Base


class User(Base):
    """
    User account for session authentication.

    password holds "<hex salt>.<hex hash>", never the plain password.
    email is unique at the storage level so concurrent signups cannot both succeed.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    admin = Column(Boolean, nullable=False, default=False, server_default=false())

    reports = relationship(
        "Report",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r} admin={self.admin}>"
