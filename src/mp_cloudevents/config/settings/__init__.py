"""Config settings – 12-factor env-based configuration."""
from mp_cloudevents.config.settings.base import Settings
from mp_cloudevents.config.settings.cloudevents import CloudEventSettings
from mp_cloudevents.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from mp_cloudevents.config.settings.validator import SettingsValidator

__all__ = [
    "CloudEventSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
    "SettingsValidator",
]
