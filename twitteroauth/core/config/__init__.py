"""Configuration module for twitteroauth.

Usage:
    from twitteroauth.core.config import settings

    client = TwitterOAuth.from_settings(settings)
"""

from twitteroauth.core.config.settings import Settings

__all__ = [
    "Settings",
    "settings",
]

# Singleton settings instance
settings = Settings()
