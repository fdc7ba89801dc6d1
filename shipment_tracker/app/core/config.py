"""
Configuration settings for the Shipment Tracker.

This module handles application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""
    
    # Application
    app_name: str = "Shipment Tracker"
    api_version: str = "v1"
    debug: bool = False
    log_level: str = "INFO"
    
    # Database Configuration
    database_url: str = "sqlite+aiosqlite:///./logistics.db"
    db_echo: bool = False
    db_pool_size: int = 5
    db_max_overflow: int = 10
    
    # Schema / Fixture Loading
    load_on_startup: bool = True
    drop_existing: bool = True
    sample_consignment_no: int = 1001
    
    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
