"""Configuration management using Pydantic settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Codec settings loaded from ``GPX_``-prefixed environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GPX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Defaults for documents built in code (e.g. from geometries)
    default_version: str = "1.0"
    default_creator: str = "gpxcodec"

    # GPX.write_pretty() formatting
    pretty_prefix: str = ""
    pretty_indent: str = "\t"

    # Reject lat outside [-90, 90] / lon outside [-180, 180] on read.
    # Off by default: out-of-range points pass through unchanged.
    strict_coordinates: bool = False


settings = Settings()
