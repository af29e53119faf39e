from models.admin import AdminUser
from models.application import AccountApplication, LoanApplication
from models.branch import Branch
from models.contact import ContactInfo, ContactMessage
from models.content import AboutSection, FaqItem, HeroSlide, PageContentSection, Product, ProductCard
from models.news import NewsArticle

__all__ = [
    "AboutSection",
    "AccountApplication",
    "AdminUser",
    "Branch",
    "ContactInfo",
    "ContactMessage",
    "FaqItem",
    "HeroSlide",
    "LoanApplication",
    "NewsArticle",
    "PageContentSection",
    "Product",
    "ProductCard",
]
