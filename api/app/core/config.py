"""
Configuración central del servicio.
Gestiona variables de entorno y configuraciones globales.
Soporta configuración dinámica para desarrollo (ENVIRONMENT=development)
y producción (ENVIRONMENT=production).
"""
import json
from typing import List, Literal
from pydantic_settings import BaseSettings
from pydantic import Field, computed_field


class Settings(BaseSettings):
    """
    Clase de configuración del servicio.
    Lee variables de entorno y proporciona valores por defecto.

    - DATABASE_URL se puede especificar completa o por componentes
    - PARTNER_UPSERT_MODE: 'atomic' escribe con INSERT ... ON CONFLICT,
      'read_then_write' usa INSERT o UPDATE por separado
    - PARTNER_KEY_LOCKING serializa en el proceso las peticiones del mismo ID
    """

    # Configuración de la aplicación
    APP_NAME: str = Field(default="Business Partner Sync")
    APP_VERSION: str = Field(default="1.0.0")
    DEBUG: bool = Field(default=False)
    ENVIRONMENT: str = Field(default="production")

    # Configuración del servidor
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8000)

    # Base de datos - Componentes separados
    DATABASE_HOST: str = Field(default="localhost")
    DATABASE_PORT: int = Field(default=5432)
    DATABASE_USER: str = Field(default="partners_user")
    DATABASE_PASSWORD: str = Field(default="partners_pass")
    DATABASE_NAME: str = Field(default="partners_db")

    # Base de datos - URL completa (override de componentes si se proporciona)
    DATABASE_URL: str = Field(default="")
    DB_POOL_SIZE: int = Field(default=5)
    DB_MAX_OVERFLOW: int = Field(default=10)

    # CORS (acepta lista JSON o "*" para todos los origenes)
    CORS_ORIGINS: str = Field(default="*")

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE: str = Field(default="logs/app.log")
    AUDIT_LOG_DIR: str = Field(default="logs/audit")

    # Reconciliación de Business Partners
    PARTNER_UPSERT_MODE: Literal["atomic", "read_then_write"] = Field(default="atomic")
    PARTNER_KEY_LOCKING: bool = Field(default=True)
    PARTNER_LOCK_TIMEOUT: float = Field(default=10.0)

    @computed_field
    @property
    def effective_database_url(self) -> str:
        """
        Retorna la URL de base de datos efectiva.
        Si DATABASE_URL está definida, la usa directamente.
        Si no, construye la URL desde los componentes individuales.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}"
            f"@{self.DATABASE_HOST}:{self.DATABASE_PORT}/{self.DATABASE_NAME}"
        )

    @computed_field
    @property
    def is_development(self) -> bool:
        """Indica si el entorno es de desarrollo."""
        return self.ENVIRONMENT.lower() == "development"

    class Config:
        """Configuración de Pydantic."""
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


def get_cors_origins(cors_string: str) -> List[str]:
    """
    Parsea la configuración de CORS.
    Acepta "*" para todos los origenes, una lista JSON o valores separados por coma.
    """
    if cors_string == "*":
        return ["*"]
    try:
        return json.loads(cors_string)
    except json.JSONDecodeError:
        return [origin.strip() for origin in cors_string.split(",") if origin.strip()]


# Instancia global de configuración
settings = Settings()
