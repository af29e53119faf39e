from datetime import date
from typing import Optional

from schemas.base import Amount, InsertSchema, OptionalText, RequiredText


class AccountApplicationCreate(InsertSchema):
    first_name: RequiredText
    last_name: RequiredText
    email: RequiredText
    phone: RequiredText
    date_of_birth: date
    address: RequiredText
    id_type: RequiredText
    id_number: RequiredText
    account_type: RequiredText
    initial_deposit: Amount


class LoanApplicationCreate(InsertSchema):
    first_name: RequiredText
    last_name: RequiredText
    email: RequiredText
    phone: RequiredText
    business_name: RequiredText
    business_type: RequiredText
    business_address: RequiredText
    loan_amount: Amount
    loan_purpose: RequiredText
    monthly_income: Amount
    monthly_expenses: Amount
    existing_loans: Optional[OptionalText] = None
    collateral_type: Optional[OptionalText] = None
    collateral_value: Optional[Amount] = None
