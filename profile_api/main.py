import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from profile_api.config.settings import Settings, get_settings
from profile_api.core.error_handlers import register_error_handlers
from profile_api.modules.public import routes as public_routes
from profile_api.modules.auth import routes as auth_routes
from profile_api.modules.protected import routes as protected_routes
from profile_api.modules.profiles import routes as profiles_routes

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )


class SecurityHeadersMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                message["headers"].extend([
                    (b"X-Content-Type-Options", b"nosniff"),
                    (b"X-Frame-Options", b"DENY"),
                    (b"X-XSS-Protection", b"1; mode=block"),
                ])
            await send(message)

        await self.app(scope, receive, send_with_headers)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    limiter = Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit],
        enabled=settings.rate_limit_enabled,
    )
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description=settings.app_description,
        servers=[{"url": settings.public_url, "description": "Local"}],
        debug=settings.debug,
        redirect_slashes=False,
    )
    # read per request by get_supabase
    app.state.settings = settings
    app.state.limiter = limiter

    register_error_handlers(app, is_production=settings.is_production)

    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins_list(),
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Include module routes
    app.include_router(public_routes.router)
    app.include_router(auth_routes.router, prefix="/api")
    app.include_router(protected_routes.router, prefix="/api")
    app.include_router(profiles_routes.router, prefix="/api")

    @app.get("/health", include_in_schema=False)
    @limiter.exempt
    async def health():
        return {"status": "healthy"}

    @app.on_event("startup")
    async def startup_event():
        logger.info("Server is running on http://%s:%s", settings.host, settings.port)
        logger.info("API Docs: %s/docs", settings.public_url)
        if not settings.supabase_anon_key:
            logger.warning("SUPABASE_ANON_KEY is not set; Supabase calls will fail")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Application shutdown")

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "profile_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
