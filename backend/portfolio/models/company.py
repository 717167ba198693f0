from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from portfolio.db.base import Base


class Company(Base):
    """Employer referenced by experience entries. Upserted by company_code."""

    __tablename__ = "company"

    id = Column("company_id", Integer, primary_key=True)
    company_code = Column(String(100), unique=True, index=True, nullable=False)
    name = Column(String(100), nullable=False)
    address = Column(String(255))
    phone = Column(String(20))
    industry = Column(String(50))
    department = Column(String(50))  # team
    position = Column(String(30))  # rank/title
    salary = Column(Integer)

    # Relationships
    experiences = relationship("Experience", back_populates="company")
