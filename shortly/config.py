from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """
    
    # Environment
    environment: str = "development"
    debug: bool = False
    
    # Application
    app_name: str = "Shortly"
    app_version: str = "1.0.0"
    
    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    
    # Public address used to build short URLs.
    # When unset, scheme and host are taken from the incoming request.
    public_base_url: Optional[str] = None
    
    # Link storage
    storage_backend: str = "memory"  # Options: "memory" (anything else falls back to memory)
    
    # Identifier generation
    identifier_strategy: str = "hashids"  # Options: "hashids"
    identifier_min_length: int = 0  # 0 = shortest encoding the library produces
    
    # Logging
    log_level: str = "INFO"
    log_json: bool = False
    
    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
