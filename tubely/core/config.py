"""
Core configuration settings
"""

import tempfile
from typing import Optional

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Basic settings
    app_name: str = "Tubely"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8091
    public_base_url: Optional[str] = None

    # Database
    database_url: str = "sqlite:///./tubely.db"

    # Auth
    jwt_secret: str = "tubely-dev-secret"
    jwt_algorithm: str = "HS256"
    jwt_issuer: str = "tubely-access"

    # Storage
    assets_root: str = "./assets"
    temp_dir: str = tempfile.gettempdir()

    @property
    def base_url(self) -> str:
        if self.public_base_url:
            return self.public_base_url.rstrip("/")
        return f"http://localhost:{self.port}"

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
