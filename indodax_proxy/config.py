from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "Indodax Proxy"
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    # Comma separated list of frontend origins allowed by CORS
    ALLOWED_ORIGINS: str = "http://localhost:3000"
    EXCHANGE_NAME: str = "indodax"
    UPSTREAM_BASE_URL: str = "https://indodax.com/api"
    UPSTREAM_CHARTS_URL: str = "https://indodax.com/api/charts"
    UPSTREAM_TIMEOUT_SECONDS: float = 10.0
    LOG_LEVEL: str = "INFO"

    @property
    def allowed_origins(self) -> List[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]


settings = Settings()
