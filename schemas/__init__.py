from schemas.admin import AdminLogin, AdminSetup
from schemas.application import AccountApplicationCreate, LoanApplicationCreate
from schemas.branch import BranchCreate
from schemas.contact import ContactInfoCreate, ContactMessageCreate
from schemas.content import (
    AboutSectionCreate,
    FaqItemCreate,
    HeroSlideCreate,
    PageContentSectionCreate,
    ProductCardCreate,
    ProductCreate,
)
from schemas.news import NEWS_CATEGORIES, NewsArticleCreate
from schemas.validation import FieldError, ValidationResult, field_errors, validate

__all__ = [
    "AboutSectionCreate",
    "AccountApplicationCreate",
    "AdminLogin",
    "AdminSetup",
    "BranchCreate",
    "ContactInfoCreate",
    "ContactMessageCreate",
    "FaqItemCreate",
    "FieldError",
    "HeroSlideCreate",
    "LoanApplicationCreate",
    "NEWS_CATEGORIES",
    "NewsArticleCreate",
    "PageContentSectionCreate",
    "ProductCardCreate",
    "ProductCreate",
    "ValidationResult",
    "field_errors",
    "validate",
]
