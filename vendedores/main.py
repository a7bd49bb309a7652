"""
MS-VENDEDORES - Microservicio de Gestión de Vendedores
FastAPI Application
"""
from contextlib import asynccontextmanager
import logging

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .config import settings
from .models import Base, engine, get_db
from .routers import vendedores_router
from .schemas import ErrorResponse, HealthResponse
from .utils import setup_logging, setup_middleware
from .utils.links import timestamp_ms

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info(f"[STARTUP] {settings.APP_NAME} v{settings.APP_VERSION} iniciado")
    logger.info(f"[INFO] Documentación disponible en: http://{settings.SERVICE_HOST}:{settings.SERVICE_PORT}/docs")
    logger.info(f"[INFO] Endpoints de vendedores en: {settings.API_PREFIX}")

    yield

    logger.info(f"[SHUTDOWN] {settings.APP_NAME} detenido")


# Crear aplicación FastAPI
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="""
    Microservicio de gestión de vendedores de PerfumeLandia SPA.

    ## Funcionalidades

    * **Raíz**: Enlaces de navegación a todas las operaciones
    * **Crear**: Registro de vendedor con sucursal y meta mensual
    * **Buscar**: Consulta de vendedor por ID
    * **Eliminar**: Eliminación de vendedor por ID
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

setup_middleware(app)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Cuerpo o parámetros inválidos: mismo formato de error que el resto de la API"""
    errores = "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    cuerpo = ErrorResponse(error="Solicitud inválida", message=errores, timestamp=timestamp_ms())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=cuerpo.model_dump(by_alias=True, exclude_none=True)
    )


app.include_router(
    vendedores_router,
    prefix=settings.API_PREFIX,
    tags=["vendedores"]
)


@app.get("/", include_in_schema=False)
async def root():
    """Redireccionar a la documentación"""
    return RedirectResponse(url="/docs")


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check(db: Session = Depends(get_db)):
    """Health check"""
    try:
        db.execute(text("SELECT 1"))
        db_status = "connected"
    except SQLAlchemyError as e:
        logger.error(f"Base de datos no disponible: {e}")
        db_status = "disconnected"

    return HealthResponse(
        status="healthy" if db_status == "connected" else "unhealthy",
        service=settings.APP_NAME,
        version=settings.APP_VERSION,
        database=db_status
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "vendedores.main:app",
        host=settings.SERVICE_HOST,
        port=settings.SERVICE_PORT,
        reload=settings.DEBUG
    )
