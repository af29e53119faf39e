from typing import Optional

from pydantic import PrivateAttr
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Lead City MFB API"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3005

    # Unset means persistence is disabled: the app still boots and data routes answer 500.
    database_url: Optional[str] = None
    cors_origins: str = "http://localhost:5173,http://127.0.0.1:5173"

    jwt_secret: str = "dev-change-this-secret-before-deploying"
    jwt_algorithm: str = "HS256"
    admin_session_minutes: int = 60

    admin_username: Optional[str] = None
    admin_password: Optional[str] = None

    seed_default_branch: bool = True

    log_level: str = "INFO"
    log_format: str = "text"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    _is_sqlite: bool = PrivateAttr(default=False)
    _is_postgresql: bool = PrivateAttr(default=False)

    def model_post_init(self, __context: object) -> None:
        _scheme = (self.database_url or "").split(":")[0].lower()
        object.__setattr__(self, "_is_sqlite", "sqlite" in _scheme)
        object.__setattr__(self, "_is_postgresql", "postgresql" in _scheme)

    @property
    def is_sqlite(self) -> bool:
        return self._is_sqlite

    @property
    def is_postgresql(self) -> bool:
        return self._is_postgresql

    @property
    def has_database(self) -> bool:
        return bool(self.database_url)


settings = Settings()
