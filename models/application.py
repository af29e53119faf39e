from sqlalchemy import Column, Date, Integer, String, Text

from database import Base
from models.common import created_at_column


class AccountApplication(Base):
    __tablename__ = "account_applications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(128), nullable=False)
    last_name = Column(String(128), nullable=False)
    email = Column(String(320), nullable=False)
    phone = Column(String(32), nullable=False)
    date_of_birth = Column(Date, nullable=False)
    address = Column(Text, nullable=False)
    id_type = Column(String(64), nullable=False)
    id_number = Column(String(64), nullable=False)
    account_type = Column(String(64), nullable=False)
    initial_deposit = Column(Integer, nullable=False)
    # No transition logic; reviewers change it out of band.
    status = Column(String(32), nullable=False, default="pending", index=True)
    created_at = created_at_column()


class LoanApplication(Base):
    __tablename__ = "loan_applications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(128), nullable=False)
    last_name = Column(String(128), nullable=False)
    email = Column(String(320), nullable=False)
    phone = Column(String(32), nullable=False)
    business_name = Column(String(256), nullable=False)
    business_type = Column(String(128), nullable=False)
    business_address = Column(Text, nullable=False)
    loan_amount = Column(Integer, nullable=False)
    loan_purpose = Column(Text, nullable=False)
    monthly_income = Column(Integer, nullable=False)
    monthly_expenses = Column(Integer, nullable=False)
    existing_loans = Column(Text, nullable=True)
    collateral_type = Column(String(128), nullable=True)
    collateral_value = Column(Integer, nullable=True)
    status = Column(String(32), nullable=False, default="pending", index=True)
    created_at = created_at_column()
