"""Конфигурация приложения"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Настройки приложения"""

    # Словарь черт (путь к файлу или http(s) URL)
    dictionary_source: str = "data/final-enhanced-character-database.json"
    dictionary_timeout: float = 30.0

    # Ссылка на справочник стандартных иероглифов для сообщений об ошибках
    reference_list_url: str = "/standard-characters"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Application
    debug: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
