from typing import Optional

from .base import TableDefSettings


# Singleton instance
_settings: Optional[TableDefSettings] = None


def get_settings(force_reload: bool = False) -> TableDefSettings:
    """Get the singleton settings instance for the application.

    Settings are loaded from ``TABLEDEF_*`` environment variables (and a
    ``.env`` file when present) on first access.

    Args:
        force_reload: If True, creates a new instance even if one already
                     exists. Useful when environment variables have changed.

    Returns:
        TableDefSettings: The singleton settings instance

    Example:
        ```python
        settings = get_settings()
        assert settings is get_settings()
        ```
    """
    global _settings

    if _settings is None or force_reload:
        _settings = TableDefSettings()

    return _settings


def _reload_settings() -> TableDefSettings:
    """Force reload of settings.

    This is primarily for testing purposes where you need to reset
    the singleton instance.
    """
    global _settings
    _settings = None
    return get_settings(force_reload=True)
