"""
Application settings loaded from environment variables.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings

_MIN_SECRET_LENGTH = 32


class Settings(BaseSettings):
    # ── Security Secrets ──────────────────────────────────────────────────
    jwt_secret: str                                     # HS512 signing key, required
    jwt_expiry_seconds: int = 86400                     # 24 hours
    jwt_cookie_name: str = "jwt"
    cookie_secure: bool = True
    cookie_samesite: str = "none"
    bcrypt_rounds: int = 12

    # ── Database ─────────────────────────────────────────────────────────
    mongo_url: str = "mongodb://localhost:27017"
    mongo_db: str = "soton_therapy"
    mongo_timeout_ms: int = 5000        # server selection timeout

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 3000
    host: str = "0.0.0.0"
    debug: bool = False
    cors_origins: list = ["http://localhost:5173"]

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
    }

    @field_validator("jwt_secret")
    @classmethod
    def _check_secret(cls, value: str) -> str:
        value = value.strip()
        if len(value) < _MIN_SECRET_LENGTH:
            raise ValueError(
                f"JWT_SECRET must be at least {_MIN_SECRET_LENGTH} characters"
            )
        return value

    @field_validator("cookie_samesite")
    @classmethod
    def _check_samesite(cls, value: str) -> str:
        value = value.lower()
        if value not in ("strict", "lax", "none"):
            raise ValueError("COOKIE_SAMESITE must be one of strict, lax, none")
        return value


config = Settings()
