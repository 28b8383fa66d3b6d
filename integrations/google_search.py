"""
Google Custom Search integration.

Looks up a bag's published specifications when the brand/model is not in
the catalog. Results are shown to the user as links; dimensions are still
entered manually.
"""

from typing import Optional
import requests
import structlog

from config import settings
from exceptions import BagSearchError

logger = structlog.get_logger(__name__)

SEARCH_URL = "https://www.googleapis.com/customsearch/v1"


def get_search_config() -> tuple[Optional[str], Optional[str]]:
    """
    Get Custom Search credentials from settings.

    Returns:
        tuple: (api_key, engine_id)
    """
    api_key = settings.google_search_api_key
    engine_id = settings.google_search_engine_id

    if not settings.google_search_configured:
        logger.warning(
            "google_search_not_configured",
            has_api_key=bool(api_key),
            has_engine_id=bool(engine_id)
        )

    return api_key, engine_id


def build_query(brand: str, model: str) -> str:
    """Search phrase for a bag's dimensions."""
    return f"{brand} {model} bag dimensions specifications"


def search_bag_dimensions(brand: str, model: str) -> list[dict]:
    """
    Search the web for a bag's dimensions.

    Args:
        brand: Bag brand
        model: Bag model

    Returns:
        List of result items (title, link, snippet); may be empty

    Raises:
        BagSearchError: If search is not configured or the request fails
    """
    api_key, engine_id = get_search_config()

    if not api_key or not engine_id:
        raise BagSearchError("Google Custom Search API credentials not configured")

    params = {
        "key": api_key,
        "cx": engine_id,
        "q": build_query(brand, model),
    }

    try:
        logger.info("searching_bag_dimensions", brand=brand, model=model)

        response = requests.get(
            SEARCH_URL,
            params=params,
            timeout=settings.google_search_timeout_seconds
        )
        response.raise_for_status()

        items = response.json().get("items") or []

        logger.info("bag_search_complete", brand=brand, model=model, results=len(items))
        return items

    except requests.exceptions.RequestException as e:
        logger.error("bag_search_request_failed", error=str(e))
        raise BagSearchError(
            f"Google Search API error: {e}",
            details={"brand": brand, "model": model}
        )
