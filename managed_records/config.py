from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Endpoint root; requests go to {records_base_url}/records
    records_base_url: str = "http://localhost:3000"
    records_request_timeout_seconds: float = 30.0
    # Encode a single color as color=<c>&color= (what the existing /records server expects)
    records_pad_single_color: bool = True
    log_level: str = "INFO"


settings = Settings()
