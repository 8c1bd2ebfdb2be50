import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from miniapis.core.config import get_settings
from miniapis.core.logging import configure_logging
from miniapis.routers import quotemaster as quotemaster_router
from miniapis.services.planner_service import PlannerService
from miniapis.services.quote_service import QuoteService

logger = logging.getLogger(__name__)

HANDSHAKE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    # First run after a fresh checkout: materialise the live JSON files
    for store in (app.state.quote_service.store, app.state.planner_service.store):
        store.init()
    logger.info("mini-apis ready (env=%s)", get_settings().app_env)
    yield


def create_app(
    quote_service: QuoteService | None = None,
    planner_service: PlannerService | None = None,
) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``uvicorn miniapis.app:app``)."""
    settings = get_settings()
    application = FastAPI(title="mini-apis", lifespan=lifespan)

    origins = list(settings.cors_origins)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.state.quote_service = quote_service or QuoteService()
    application.state.planner_service = planner_service or PlannerService()

    # Lets frontends check that the API server is online
    @application.api_route("/handshake", methods=HANDSHAKE_METHODS)
    def handshake():
        return Response(status_code=200)

    application.include_router(quotemaster_router.router)
    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
