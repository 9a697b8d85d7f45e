# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

# Local application imports
from .api.v1 import (
    analysis_router,
    chat_router,
    datasets_router,
    models_router,
    results_router,
    training_jobs_router,
    training_router,
)
from .application.services.training_jobs import TrainingJobService
from .core.config import get_settings
from .di.container import get_container
from .infrastructure.db.mongo_connection import close_database
from .infrastructure.storage.upload_storage import UploadStorage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Builds the DI container on startup; on shutdown stops unfinished training
    jobs and closes the MongoDB client if one was opened.
    """
    container = get_container()
    logger.info(f"Application started with '{get_settings().storage_backend}' storage backend")

    yield

    try:
        await container.get(TrainingJobService).shutdown()
        logger.info("Training jobs stopped")
    except Exception as e:
        logger.error(f"Error stopping training jobs: {e}", exc_info=True)

    close_database()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Static serving of uploaded images
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    application = FastAPI(
        title="Vision Showcase API",
        version="1.0.0",
        description="Computer vision showcase backend with mock models and a training simulation",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Uploaded images are served back to the browser
    upload_dir = UploadStorage().ensure_dir()
    application.mount("/uploads", StaticFiles(directory=str(upload_dir)), name="uploads")

    # Register API routers
    application.include_router(analysis_router, prefix="/api")
    application.include_router(results_router, prefix="/api/results")
    application.include_router(datasets_router, prefix="/api/datasets")
    application.include_router(training_router, prefix="/api/training")
    application.include_router(training_jobs_router, prefix="/api/training")
    application.include_router(chat_router, prefix="/api/chat")
    application.include_router(models_router, prefix="/api/models")

    return application


# Create application instance
app = create_application()
