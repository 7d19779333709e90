"""
Security configuration.
CORS settings for the review UI. The API itself is unauthenticated.
"""

from typing import List, Union
from pydantic import field_validator
from pydantic_settings import BaseSettings


def _split_csv(v: Union[str, List[str], None], name: str) -> List[str]:
    if v is None or v == "":
        return ["*"]
    if isinstance(v, str):
        return [i.strip() for i in v.split(",") if i.strip()]
    elif isinstance(v, list):
        return v
    raise ValueError(f"Invalid {name} value: {v}")


class SecurityConfig(BaseSettings):
    """CORS settings."""

    ALLOWED_ORIGINS: Union[str, List[str]] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
    ALLOW_CREDENTIALS: bool = False
    ALLOWED_METHODS: Union[str, List[str]] = ["GET", "POST", "PATCH", "OPTIONS"]
    ALLOWED_HEADERS: Union[str, List[str]] = ["*"]

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        return _split_csv(v, "ALLOWED_ORIGINS")

    @field_validator("ALLOWED_METHODS", mode="before")
    @classmethod
    def assemble_cors_methods(cls, v: Union[str, List[str]]) -> List[str]:
        return _split_csv(v, "ALLOWED_METHODS")

    @field_validator("ALLOWED_HEADERS", mode="before")
    @classmethod
    def assemble_cors_headers(cls, v: Union[str, List[str]]) -> List[str]:
        return _split_csv(v, "ALLOWED_HEADERS")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"
