from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api import router
from app.core import get_logger, settings
from app.services import get_container

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Iniciando Psychosocial Risk Diagnostic [{settings.app_env}]")
    # Catálogo mal formado = fallo en el arranque, no por request
    container = get_container()
    container.validate()
    logger.info(
        f"Catálogo: {len(container.catalog)} factores, "
        f"{len(container.catalog.inverted_questions)} preguntas invertidas"
    )
    yield
    logger.info("Cerrando Psychosocial Risk Diagnostic")


app = FastAPI(
    title="Psychosocial Risk Diagnostic",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Exception handler global
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {type(exc).__name__}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# Routes
app.include_router(router, prefix="/api", tags=["Diagnostic"])


@app.get("/health")
async def health_check():
    return {"status": "ok", "env": settings.app_env}
