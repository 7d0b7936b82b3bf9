from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    yelp_ai_api_key: str = ""
    yelp_api_key: str = ""
    log_level: str = "INFO"
    http_timeout: float = 30.0
    max_providers: int = 3
    locale: str = "en_US"
