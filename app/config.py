from pydantic_settings import BaseSettings

DESKTOP_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    log_level: str = "INFO"
    scrape_timeout: float = 10.0
    user_agent: str = DESKTOP_USER_AGENT
    batch_delay_seconds: float = 0.5
    max_jobs: int = 100
