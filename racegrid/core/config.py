from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator


class Settings(BaseSettings):
    # Default grid document read by the CLI when --grid is not given
    grid_path: str = "grid.json"
    # DEBUG shows per-race validation totals
    log_level: str = "INFO"

    # Allow empty env strings for the log level
    @field_validator("log_level", mode="before")
    @classmethod
    def _empty_to_default(cls, v):
        if v in ("", None, "null", "None"):
            return "INFO"
        return str(v).upper()

    model_config = SettingsConfigDict(env_prefix="RACEGRID_", env_file=".env", extra="ignore")


settings = Settings()
