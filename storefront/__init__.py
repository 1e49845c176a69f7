"""
Proto-Store storefront package.

- catalog: product list fetched once per session
- cart: cart manager with local persistence
- orders: order form and checkout flow
- services: shop API client and money helpers
- routers: FastAPI surface
"""

__version__ = "1.0.0"
