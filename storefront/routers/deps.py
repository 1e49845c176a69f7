"""Shared dependencies for storefront routers."""
from storefront.session import StorefrontSession, get_session


def get_storefront_session() -> StorefrontSession:
    """FastAPI dependency returning the current storefront session."""
    return get_session()
