from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.env_manager import EnvManager


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    PROJECT_NAME: str = EnvManager.get_env_variable("PROJECT_NAME", "Post Server")
    PROJECT_INFO: str = EnvManager.get_env_variable(
        "PROJECT_INFO", "In-memory post management API"
    )
    PROJECT_VERSION: str = EnvManager.get_env_variable("PROJECT_VERSION", "1.0.0")

    HOST: str = EnvManager.get_env_variable("HOST", "127.0.0.1")
    PORT: int = int(EnvManager.get_env_variable("PORT", "3000"))
    CORS_ORIGINS: str = EnvManager.get_env_variable(
        "CORS_ORIGINS", "http://localhost:8080"
    )

    # Seconds a request waits for the post store before giving up
    STORE_LOCK_TIMEOUT: float = EnvManager.get_env_float("STORE_LOCK_TIMEOUT", 5.0)

    LOG_LEVEL: str = EnvManager.get_env_variable("LOG_LEVEL", "INFO")

    # Base URL the CLI client talks to
    API_URL: str = EnvManager.get_env_variable("API_URL", "http://localhost:3000")

    def get_cors_origins(self) -> List[str]:
        """Split the comma separated origin list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
