from sqlalchemy import Boolean, Column, Integer, String

from portfolio.db.base import Base


class User(Base):
    """Administrator account allowed to edit the portfolio."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    password = Column(String(200), nullable=False)  # bcrypt hash
    role = Column(String(20), nullable=False)  # 'ADMIN'
    enabled = Column(Boolean, nullable=False, default=True)
