"""Central configuration loaded from environment variables / .env file.

Usage:
    from discord_rest.config import Settings
    settings = Settings()
    print(settings.discord_api_url)

To extend in an application:
    from discord_rest.config import Settings as BaseSettings

    class MyBotSettings(BaseSettings):
        my_custom_var: str = "default"
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Discord API ---
    discord_api_url: str = "https://discord.com/api/v10"
    discord_token: str = ""  # Bot token, sent as "Authorization: Bot <token>"
    request_timeout_seconds: float = 30.0

    # --- General ---
    log_level: str = "INFO"
    log_format: str = "auto"  # auto | json | console
