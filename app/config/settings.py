# app/config/settings.py
from pydantic_settings import BaseSettings
from typing import List
import os

class Settings(BaseSettings):
    # App Info
    app_name: str = "DNcommerce API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    
    # Database - SQLite local por defecto; en producción postgresql+psycopg://...
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./dncommerce.db")
    
    # CORS
    cors_origins: List[str] = ["*"]
    
    # Server
    host: str = "0.0.0.0"
    port: int = int(os.getenv("PORT", 3000))
    
    # SSL para PostgreSQL en producción
    @property
    def database_url_with_ssl(self) -> str:
        """Agregar SSL para conexiones de producción"""
        if self.database_url and "render" in self.database_url:
            if "?sslmode=" not in self.database_url:
                return f"{self.database_url}?sslmode=require"
        return self.database_url
    
    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = 'ignore'

settings = Settings()
