from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DINNER_")

    env: Env = Env.local
    log_level: str = "INFO"
    cook_time_scale: float = 1.0
