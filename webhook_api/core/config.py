"""
Core configuration for WeFund Webhook API
"""
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application settings"""
    
    # Application
    APP_NAME: str = "WeFund Webhook API"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"
    
    # Paths
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    PUBLIC_DIR: Path = BASE_DIR / "public"
    
    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    
    # CORS
    CORS_ORIGINS: list = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = False
    CORS_ALLOW_METHODS: list = ["*"]
    CORS_ALLOW_HEADERS: list = ["*"]
    
    # Webhook store
    MAX_STORED_WEBHOOKS: int = 10
    # Count any falsy value (0, "", [], ...) as a missing required field
    LEGACY_TRUTHY_VALIDATION: bool = False
    
    # Simulator
    SIMULATOR_WEBHOOK_URL: Optional[str] = None
    SIMULATOR_TIMEOUT_SECONDS: float = 10.0

    class Config:
        case_sensitive = True
        env_file = ".env"
        extra = "ignore"

    @property
    def simulator_webhook_url(self) -> str:
        """URL the simulator posts sample orders to."""
        if self.SIMULATOR_WEBHOOK_URL:
            return self.SIMULATOR_WEBHOOK_URL
        return f"http://localhost:{self.PORT}/api/webhook/woocommerce"

settings = Settings()
