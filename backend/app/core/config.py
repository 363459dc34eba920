import sys

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    INTIME_API_URL: str = ""
    INTIME_API_TIMEOUT_SECONDS: float = 15.0
    INTIME_DEFAULT_ORG_ID: str = ""

    CORS_ALLOW_ORIGINS: list[str] = ["http://localhost:3000"]

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
