"""Configuration module for poco2csla."""

from .models import Poco2CslaConfig, load_config, save_config

__all__ = ["Poco2CslaConfig", "load_config", "save_config"]
