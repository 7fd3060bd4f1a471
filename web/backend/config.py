#!/usr/bin/env python3
"""
Configuration management for the SkillScout web application.
"""

from functools import lru_cache

from core.config_loader import AppConfig, load_config


@lru_cache()
def get_config() -> AppConfig:
    """
    Get application configuration with caching.

    Loads from YAML file (SKILLSCOUT_CONFIG or config.yaml) and applies
    environment variable overrides. Result is cached for performance.

    Returns:
        AppConfig: The application configuration.
    """
    return load_config()
