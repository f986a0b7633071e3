from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Logging ("DEBUG" enables debug output and stack traces)
    MODE: str = "PRODUCTION"

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:8080"

    # Comparison view
    DEFAULT_INCLUDE_AWS: bool = True

    # Batch processing
    BATCH_PROGRESS_EVERY: int = 10

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def debug_mode(self) -> bool:
        return self.MODE.upper() == "DEBUG"

settings = Settings()
