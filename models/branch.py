from sqlalchemy import Column, Integer, String, Text

from database import Base


class Branch(Base):
    __tablename__ = "branches"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Unique so two concurrent seeds cannot both insert the default branch.
    name = Column(String(256), nullable=False, unique=True)
    address = Column(Text, nullable=False)
    phone = Column(String(32), nullable=False)
    latitude = Column(String(32), nullable=True)
    longitude = Column(String(32), nullable=True)
    hours = Column(String(256), nullable=False)
