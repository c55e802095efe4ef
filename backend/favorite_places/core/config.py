from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Embedded listener (loopback only)
    SERVER_HOST: str = "127.0.0.1"
    SERVER_PORT: int = 8989

    # Body of GET / - clients use it to recognise this service on the port
    SERVER_IDENTIFIER: str = "CS 124"

    # Overrides the bundled favorite_places/data/places.csv
    DATASET_PATH: Optional[str] = None

    # Readiness probe
    READINESS_RETRY_COUNT: int = 8
    READINESS_RETRY_DELAY: float = 0.512

    LOGGER: int = 20
    LOG_DIRECTORY: str = "logs"
    LOG_FILE: str = "app.log"

    model_config = SettingsConfigDict(
        # Look for .env in the current folder OR the parent folder
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def server_url(self) -> str:
        return f"http://{self.SERVER_HOST}:{self.SERVER_PORT}"

settings = Settings()
