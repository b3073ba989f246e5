"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from folio.config import AuthSettings, DiscoverySettings, EngagementSettings, Settings
from folio.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_discovery_settings(self, settings: Settings) -> DiscoverySettings:
        """Provide search and ranking settings."""
        return settings.discovery

    @provide(scope=Scope.APP)
    def provide_engagement_settings(self, settings: Settings) -> EngagementSettings:
        """Provide view and like counting settings."""
        return settings.engagement
