from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "Product Catalogue"
    LOG_LEVEL: str = "INFO"

    # Label used when a catalogue is built without an explicit name
    DEFAULT_CATALOGUE_NAME: str = "Default Catalogue"

    # Keyword search does exact substring matching unless this is switched off
    SEARCH_KEYWORD_CASE_SENSITIVE: bool = True

    model_config = SettingsConfigDict(env_file=".env", extra='ignore', env_file_encoding='utf-8')

settings = Settings()
