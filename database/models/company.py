from sqlalchemy import Column, Integer, Text, Index, func

from .base import Base


class Company(Base):
    __tablename__ = 'companies'

    handle = Column(Text, primary_key=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    num_employees = Column(Integer)
    logo_url = Column(Text)

    __table_args__ = (
        Index('ix_companies_handle_lower', func.lower(handle), unique=True),
    )
