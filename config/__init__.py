"""
Configuration module.

Exports:
    settings: Application settings instance
    get_settings: Function to get settings (for dependency injection)
    get_supabase_client: Function to get Supabase client
    check_connection: Health check function
"""

from config.settings import settings, get_settings, Settings
from config.database import get_supabase_client, check_connection

__all__ = [
    # Settings
    "settings",
    "get_settings",
    "Settings",

    # Database
    "get_supabase_client",
    "check_connection",
]
