from functools import lru_cache
from typing import Tuple, Type

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)


class Settings(BaseSettings):
    token: str = Field(..., description="GroupMe access token")
    group_id: str = Field(..., description="GroupMe group to watch")
    gpt_token: str = Field(..., description="OpenAI API Key")
    chatbot_name: str = Field(..., min_length=1, description="Substring of the bot's own nickname")
    trigger_word: str = Field(..., min_length=1, description="Substring that activates the bot")

    api_root: str = "https://api.groupme.com/v3"
    completion_model: str = "gpt-3.5-turbo-instruct"
    poll_interval: float = Field(1.0, gt=0, description="Seconds to sleep when no new message")
    http_timeout: float = 15.0
    http_max_attempts: int = Field(1, ge=1, description="Attempts per GroupMe call on transport errors")
    exit_on_error: bool = Field(True, description="Stop the bot on the first remote-call error")
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="CHATBOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        yaml_file="chatbot.yaml",
        extra="ignore",
        # GroupMe ids are numeric and often written unquoted in chatbot.yaml
        coerce_numbers_to_str=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # chatbot.yaml sits below the environment so a deploy can override single keys
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
