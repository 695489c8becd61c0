"""
Main FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from autocare_console.api_client import SessionExpired, json_session
from autocare_console.config import Settings, get_settings
from autocare_console.csrf import CSRFMiddleware
from autocare_console.logging_setup import setup_logging
from autocare_console.routers import auth, job_cards, invoices, quotations, services, stock, vehicles, vendors
from autocare_console.web import BASE_DIR, redirect

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan events for the application.
    Opens and closes the pooled HTTP session used for backend calls.
    """
    settings = app.state.settings
    logger.info("🚀 Starting %s...", settings.app_name)
    logger.info("🌐 Backend API: %s", settings.api_base_url)

    yield

    app.state.http.close()
    logger.info("👋 Shutting down %s...", settings.app_name)


def create_app(settings: Settings = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="""
        ## 🔧 AutoCare Admin Console

        Browser console for the garage's service backend.

        ### Pages:
        * **Vehicles**: Register and track vehicles in for service
        * **Job cards**: Job options and work orders
        * **Stock**: Spare-part CREDIT/DEBIT transactions
        * **Vendors**: Supplier records
        * **Quotations**: Part and labour estimates
        * **Services**: The labour catalogue
        * **Invoices**: Invoice lookup
        """,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.http = json_session()

    # Last added runs first: sessions must be loaded before the CSRF check
    app.add_middleware(CSRFMiddleware, exclude=settings.csrf_exclude_paths)
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.secret_key,
        https_only=settings.is_production(),
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.mount("/static", StaticFiles(directory=BASE_DIR / "static"), name="static")

    app.include_router(auth.router)
    app.include_router(vehicles.router)
    app.include_router(job_cards.router)
    app.include_router(stock.router)
    app.include_router(vendors.router)
    app.include_router(quotations.router)
    app.include_router(services.router)
    app.include_router(invoices.router)

    @app.exception_handler(SessionExpired)
    async def session_expired(request: Request, exc: SessionExpired):
        """The backend rejected the token: sign out and start over."""
        request.session.clear()
        return redirect(request, "sign_in_form")

    @app.get("/", include_in_schema=False)
    async def root(request: Request):
        return redirect(request, "list_vehicles")

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": settings.app_version,
        }

    return app


def run():
    import uvicorn
    uvicorn.run(
        "autocare_console.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        reload=get_settings().debug,
    )


if __name__ == "__main__":
    run()
