import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api.routers.employees import router as employees_router
from app.core.config import settings
from app.core.errors import EmployeeNotFoundError
from app.core.logging import configure_logging
from app.services.container import Container, build_container

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> FastAPI:
    container = container or build_container(settings)

    app = FastAPI(
        title=container.settings.app_name,
        version="1.0.0",
        description="In-memory employee directory with CRUD and paginated listing.",
    )
    app.state.container = container

    @app.get("/")
    def health() -> dict[str, str]:
        return {"status": "ok", "service": container.settings.app_name}

    @app.exception_handler(EmployeeNotFoundError)
    async def employee_not_found_handler(request: Request, exc: EmployeeNotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": str(exc)},
        )

    @app.exception_handler(RequestValidationError)
    async def invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected request body for %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Invalid request body"},
        )

    app.include_router(employees_router)
    return app


app = create_app()


def run() -> None:
    configure_logging(settings)
    logger.info("Server started on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
