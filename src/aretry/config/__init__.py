"""Config – env-driven retry settings."""
from aretry.config.loaders import EnvSettingsLoader, SettingsLoader
from aretry.config.settings import STRATEGIES, RetrySettings

__all__ = ["EnvSettingsLoader", "RetrySettings", "STRATEGIES", "SettingsLoader"]
