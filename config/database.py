"""
Database connection management.

Provides the Supabase client singleton shared by all services.
"""

from supabase import create_client, Client
from functools import lru_cache
import structlog

from config.settings import settings
from exceptions import DatabaseError

logger = structlog.get_logger(__name__)


@lru_cache()
def get_supabase_client() -> Client:
    """
    Get cached Supabase client instance.

    Uses lru_cache to ensure only one client is created.
    Call get_supabase_client.cache_clear() to reconnect.

    Returns:
        Client: Supabase client

    Raises:
        DatabaseError: If connection fails
    """
    try:
        logger.info(
            "connecting_to_supabase",
            url=settings.supabase_url[:30] + "..."  # Log partial URL only
        )

        client = create_client(
            settings.supabase_url,
            settings.supabase_key
        )

        client.table("airlines").select("id").limit(1).execute()

        logger.info("supabase_connected", status="success")

        return client

    except Exception as e:
        logger.error(
            "supabase_connection_failed",
            error=str(e),
            error_type=type(e).__name__
        )
        raise DatabaseError("connect", f"Failed to connect to Supabase: {e}") from e


# ===================
# HELPER FUNCTIONS
# ===================

def check_connection() -> dict:
    """
    Check database connection health.

    Returns:
        dict: Connection status with airline and bag counts
    """
    try:
        client = get_supabase_client()

        airlines = client.table("airlines").select("id", count="exact").execute()
        bags = client.table("bags").select("id", count="exact").execute()

        return {
            "status": "healthy",
            "airlines_count": airlines.count,
            "bags_count": bags.count
        }

    except Exception as e:
        return {
            "status": "unhealthy",
            "error": str(e)
        }

