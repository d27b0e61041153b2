# api/fastapi_app.py
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from .routes.quiz_routes import router as quiz_router
from .routes.page_routes import router as page_router
from quiz_generator_modular.config import config, configure_logging, initialize_all, load_environment_config
from quiz_generator_modular.services.errors import QuizGenerationError

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize all components on startup"""
    logger.info("Starting Quiz Generator API...")
    initialization_status = initialize_all()
    logger.info("Initialization Status:")
    for component, status in initialization_status.items():
        status_icon = "✅" if status else "❌"
        logger.info(f"{status_icon} {component}: {'Success' if status else 'Failed'}")
    yield
    logger.info("Shutting down...")

def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    # .env may carry QUIZ_LOG_LEVEL
    load_environment_config()
    configure_logging()

    app = FastAPI(
        title="Quiz Generator API",
        description="API for generating five question/answer pairs from a short text using OpenAI",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Configure CORS
    configure_cors(app)

    app.add_exception_handler(QuizGenerationError, quiz_generation_error_handler)

    # Include routers
    app.include_router(quiz_router)
    app.include_router(page_router)

    return app

def configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware"""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

async def quiz_generation_error_handler(request: Request, exc: QuizGenerationError) -> JSONResponse:
    """Render QuizGenerationError as {error, details?, raw?}"""
    if exc.status_code >= 500:
        logger.error(f"❌ {request.url.path}: {exc.error}")
    else:
        logger.info(f"Rejected {request.url.path}: {exc.error}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

# Create the app instance
app = create_app()
