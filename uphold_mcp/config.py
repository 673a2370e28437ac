from pydantic_settings import BaseSettings, SettingsConfigDict

from uphold_mcp import __version__


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "uphold-mcp-server"
    UPHOLD_API_BASE_URL: str | None = None
    USER_AGENT: str = f"uphold-mcp-server/{__version__}"
    LOG_LEVEL: str = "INFO"
    ENABLE_ALL_TICKERS: bool = True

settings = Settings()
