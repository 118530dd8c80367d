from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi import status
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
from config import HOST, LOG_LEVEL, PORT, PUBLIC_DIR, PUBLIC_URL_PREFIX
from app.database.connections import lifespan
from app.includes import get_all_routers
from app.services.json import return_error_json
from app.services.uploads import ensure_upload_dir
from tools.routers import gather_routers


logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.info("🚀 Starting FastAPI application")

# StaticFiles refuses a missing directory, so create it before mounting
ensure_upload_dir()

app = FastAPI(
    title="Car API",
    description="List cars and add new ones with an optional photo",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    swagger_ui_parameters={"defaultModelsExpandDepth": -1},
)
routers = get_all_routers()
app = gather_routers(app, routers)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.mount(PUBLIC_URL_PREFIX, StaticFiles(directory=PUBLIC_DIR), name="public")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return return_error_json(error=str(exc.detail), code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return return_error_json(error="Invalid request.", code=status.HTTP_400_BAD_REQUEST)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=True)
    return return_error_json(
        error="An unexpected error occurred.",
        code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=HOST, port=PORT)
