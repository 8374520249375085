from pydantic_settings import BaseSettings, SettingsConfigDict


# the listening port is fixed and deliberately not read from the environment
LISTEN_PORT = 8080


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    HOST: str = "0.0.0.0"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = []


settings = Settings()
