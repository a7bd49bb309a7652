"""
Configuración del microservicio MS-VENDEDORES
"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Configuración de la aplicación"""

    # API Configuration
    APP_NAME: str = "MS-VENDEDORES - Seller Management Service"
    APP_VERSION: str = "1.0.0"
    API_PREFIX: str = "/api/v1/vendedor"
    DEBUG: bool = False

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./vendedores.db"

    # Logging
    LOG_LEVEL: str = "INFO"

    # CORS Configuration
    CORS_ORIGINS: list = [
        "http://localhost:3000",
        "http://localhost:8080",
        "http://localhost"
    ]

    # Service Configuration
    SERVICE_HOST: str = "0.0.0.0"
    SERVICE_PORT: int = 8000

    # Discovery root
    ROOT_MESSAGE: str = "API de Gestión de Vendedores - PerfumeLandia SPA"
    ROOT_VERSION: str = "v1.0"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
