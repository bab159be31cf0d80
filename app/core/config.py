from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # these must be set in the environment
    database_url: str

    # Optional Settings with default values
    app_name: str = "Wallet API Service"
    debug: bool = False
    log_file: str = "app.log"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

settings = Settings()
