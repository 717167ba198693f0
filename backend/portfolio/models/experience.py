from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from portfolio.db.base import Base


class Experience(Base):
    """
    One project/assignment carried out at a company.

    tech_stack and keywords hold comma/semicolon/newline separated tags;
    details holds one bullet per line.
    """

    __tablename__ = "experience"

    id = Column("experience_id", Integer, primary_key=True)
    experience_code = Column(String(100), unique=True, index=True, nullable=False)
    name = Column(String(100), nullable=False)
    company_id = Column(Integer, ForeignKey("company.company_id"), nullable=False)

    period = Column(String(100))
    role = Column(String(255))
    tech_stack = Column(Text)
    keywords = Column(Text)
    details = Column(Text)

    # Relationships
    company = relationship("Company", back_populates="experiences")
