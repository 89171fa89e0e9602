"""
Application FastAPI de RestAPI.

Initialise l'application web avec le Container DI, monte les routes et
traduit les erreurs metier en reponses HTTP.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from ..container import Container
from ..core.exceptions import DomainError, EntityNotFoundError
from ..infrastructure.persistence.database import dispose_engine
from .routes.companies import router as companies_router
from .routes.employees import router as employees_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise le Container DI au démarrage et ferme l'engine à l'arrêt."""
    container = Container()
    container.database.init()
    app.state.container = container
    yield
    dispose_engine()


app = FastAPI(title="RestAPI", lifespan=lifespan)


@app.exception_handler(EntityNotFoundError)
async def not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Erreurs de validation metier (creation, mise a jour, pagination)."""
    logger.debug(f"{request.method} {request.url.path} refuse: {exc}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


# Routes
app.include_router(employees_router)
app.include_router(companies_router)
