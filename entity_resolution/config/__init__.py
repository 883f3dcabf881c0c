"""
Configuration System

Manages configuration for the entity resolution server with a layered approach.

Configuration Priority (highest to lowest):
    1. Programmatic (passed to ResolverConfig())
    2. Config file (--config path.toml)
    3. Environment variables (ER_* prefix, .env loaded by the server)
    4. Built-in defaults

Modules:
    settings: ResolverConfig class
    providers: Provider default models
"""

from entity_resolution.config.settings import ResolverConfig

__all__ = ["ResolverConfig"]
