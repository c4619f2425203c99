from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
import yaml
import os
from dotenv import load_dotenv
_defaults = Path(__file__).with_name("defaults.yaml")
load_dotenv()

ENV_PREFIX = "RELNORM_"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX)

    # Label put in front of error messages raised on behalf of the CLI / API
    context_label: str = "relnorm"

    # HTTP service
    api_title: str = "relnorm Relative Path Normalizer"
    host: str = "127.0.0.1"
    port: int = 8000

    # Mirror every streamed payload to the console
    echo_payloads: bool = True
    # Seconds to wait between streamed payloads
    stream_interval: float = 0.0


def load_settings(defaults_path: Path = _defaults) -> Settings:
    """Build settings from the YAML defaults, letting env-vars win."""
    data = yaml.safe_load(defaults_path.read_text(encoding="utf-8")) or {}
    # Init kwargs would beat env-vars in pydantic-settings, so only pass YAML
    # values that have no env override
    overrides = {key: value for key, value in data.items() if f"{ENV_PREFIX}{key}".upper() not in os.environ}
    return Settings(**overrides)


settings = load_settings()  # singleton

__all__ = ["settings", "Settings", "load_settings"]
