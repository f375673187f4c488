"""Application settings for prizepicks-ingest."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36"
)


class Settings(BaseSettings):
    """Runtime settings for the projections feed and its proxy."""

    model_config = SettingsConfigDict(
        env_prefix="PP_INGEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    zyte_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("ZYTE_API_KEY", "PP_INGEST_ZYTE_API_KEY"),
    )
    api_url: str = "https://api.prizepicks.com/projections"
    state_code: str = "CA"
    per_page: int = 10000
    single_stat: bool = True
    game_mode: str = "pickem"
    timeout_s: float = 60.0
    proxy_host: str = "api.zyte.com"
    proxy_port: int = 8011
    user_agent: str = DEFAULT_USER_AGENT
    connect_attempts: int = 2

    def proxy_url(self) -> str:
        """Proxy URL carrying the API key as the basic-auth username."""
        return f"http://{self.zyte_api_key.strip()}:@{self.proxy_host}:{self.proxy_port}"

    def projection_params(self) -> dict[str, str | int]:
        """Query parameters for the single full-catalog projections request."""
        return {
            "per_page": self.per_page,
            "state_code": self.state_code,
            "single_stat": "true" if self.single_stat else "false",
            "game_mode": self.game_mode,
        }
