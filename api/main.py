"""Storefront Catalog FastAPI Application."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from api.config import get_settings
from api.routers import products, query, cart, analytics
from config.logging_config import get_logger, setup_logging

settings = get_settings()
setup_logging(settings.log_level)
logger = get_logger("api")

app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="API for the storefront product catalog, filters, cart and admin analytics",
)


class CacheHeaderMiddleware(BaseHTTPMiddleware):
    """Middleware to add Cache-Control headers to responses."""

    # Endpoints that can be cached
    CACHEABLE_PATHS = {
        "/api/products/facets": 300,  # 5 minutes
        "/api/analytics": 60,  # 1 minute
    }

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        # Only cache GET requests
        if request.method != "GET":
            return response

        path = request.url.path
        for cacheable_path, max_age in self.CACHEABLE_PATHS.items():
            if path.startswith(cacheable_path):
                response.headers["Cache-Control"] = f"public, max-age={max_age}"
                break
        else:
            response.headers["Cache-Control"] = "no-cache"

        return response


app.add_middleware(CacheHeaderMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(products.router, prefix="/api/products", tags=["Products"])
app.include_router(query.router, prefix="/api/query", tags=["Query"])
app.include_router(cart.router, prefix="/api/cart", tags=["Cart"])
app.include_router(analytics.router, prefix="/api/analytics", tags=["Analytics"])


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": settings.app_name,
        "version": settings.version,
        "docs": "/docs",
        "endpoints": {
            "products": "/api/products",
            "query": "/api/query",
            "cart": "/api/cart",
            "analytics": "/api/analytics",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    from api.services.database import get_db

    try:
        db = get_db()
        count = db.fetch_one("SELECT COUNT(*) FROM products")[0]
        return {
            "status": "healthy",
            "database": "connected",
            "total_products": count,
        }
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return {
            "status": "unhealthy",
            "database": "disconnected",
            "error": str(e),
        }
