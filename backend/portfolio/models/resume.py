from sqlalchemy import Column, Integer, String, Text

from portfolio.db.base import Base


class Resume(Base):
    """
    Resume of the site owner. Only the first row (lowest id) is served.

    experiences: one career per line, "company | period | department | position"
    activities / education: one item per line
    """

    __tablename__ = "resume"

    id = Column("resume_id", Integer, primary_key=True)
    member_code = Column(String(100), unique=True, index=True, nullable=False)
    name = Column(String(50), nullable=False)
    gender = Column(String(10))
    email = Column(String(100))
    phone = Column(String(20))
    address = Column(String(255))
    summary = Column(String(500))

    skills = Column(Text)
    experiences = Column(Text)
    activities = Column(Text)
    education = Column(Text)
