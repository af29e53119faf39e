from pydantic import BaseModel, Field


class AdminLogin(BaseModel):
    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1, max_length=128)

    model_config = {"extra": "forbid"}


class AdminSetup(BaseModel):
    """First-run admin creation."""

    username: str = Field(..., min_length=3, max_length=64, pattern=r"^[A-Za-z0-9_.-]+$")
    password: str = Field(..., min_length=8, max_length=128)

    model_config = {"extra": "forbid"}
