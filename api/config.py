"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from engine.graph.models import GraphSiteConfig
from engine.scoring.thresholds import SEOThresholds


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    env: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    # API Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])

    # Site (knowledge graph)
    site_url: str = "http://localhost:3000"
    site_name: str = "SEO Doctor"
    site_home_label: str = "Home"
    default_language: str = "en"

    # Length thresholds consulted by configurable validators
    seo_title_min: int = 30
    seo_title_max: int = 60
    seo_title_restrict: bool = False
    seo_description_min: int = 120
    seo_description_max: int = 160
    seo_description_restrict: bool = False
    twitter_title_max: int = 70
    twitter_title_restrict: bool = True
    twitter_description_max: int = 200
    twitter_description_restrict: bool = True
    og_title_max: int = 60
    og_title_restrict: bool = False
    og_description_max: int = 200
    og_description_restrict: bool = False

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.env == "production"

    @property
    def is_test(self) -> bool:
        """Check if running in test mode."""
        return self.env == "test"

    def seo_thresholds(self) -> SEOThresholds:
        """Threshold values for the scoring engine."""
        return SEOThresholds.from_dict(self.model_dump())

    def graph_site(self) -> GraphSiteConfig:
        """Site values for knowledge graph assembly."""
        return GraphSiteConfig(
            site_url=self.site_url,
            site_name=self.site_name,
            home_label=self.site_home_label,
            default_language=self.default_language,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
