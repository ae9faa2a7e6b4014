import dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvSettings(BaseSettings):
    # debug
    verbose: bool = False

    # seconds to wait for the purge api
    request_timeout: float = 30.0

    model_config = SettingsConfigDict(
        env_file=dotenv.find_dotenv(usecwd=True) or None,
        env_prefix="akamai_purge_",
        extra="ignore",
    )


env = EnvSettings()
