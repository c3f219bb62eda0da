"""HTTP Controllers."""

from geodiscovery.presentation.http.controllers.health import router as health_router
from geodiscovery.presentation.http.controllers.locations import router as locations_router
from geodiscovery.presentation.http.controllers.nearby_products import (
    router as nearby_products_router,
)
from geodiscovery.presentation.http.controllers.nearby_sellers import (
    router as nearby_sellers_router,
)
from geodiscovery.presentation.http.controllers.sellers import router as sellers_router

__all__ = [
    "health_router",
    "locations_router",
    "nearby_products_router",
    "nearby_sellers_router",
    "sellers_router",
]
