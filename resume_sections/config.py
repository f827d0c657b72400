from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Service settings loaded from environment variables (RESUME_SECTIONS_*) or .env."""

    # App
    app_name: str = "Resume Section Parser"
    debug: bool = False
    log_level: str = "INFO"

    # Requests
    max_text_length: int = 50_000

    model_config = {"env_prefix": "RESUME_SECTIONS_", "env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
