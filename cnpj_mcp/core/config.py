# The module is to define the configuration settings for the CNPJ MCP server.
# Author: Shibo Li
# Date: 2025-06-11
# Version: 1.0.2

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource
from functools import lru_cache
from typing import Tuple, Type


class Settings(BaseSettings):
    """
    The Settings class holds the configuration of the server. The values are
    fixed: neither environment variables nor files are read, only values
    passed explicitly to the constructor.
    Attributes:
        API_BASE_URL (str): Origin of the public company-registry API.
        SERVER_NAME (str): Name announced to MCP clients.
        VERSION (str): Server version, reported by --version and to MCP clients.
        LOG_LEVEL (str): Level of the stderr logger.
    """
    API_BASE_URL: str = "https://api-cnpj.sdebot.top"
    SERVER_NAME: str = "mcp-cnpj-intelligence"
    VERSION: str = "1.0.2"
    LOG_LEVEL: str = "WARNING"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)


# lru_cache to cache the settings instance.
@lru_cache
def get_settings() -> Settings:
    return Settings()
