from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .api.recipes import router as recipe_router
from .core.config import get_settings
from .services.generation_client import GeminiGenerationClient
from .services.recipe_service import RecipeService
from .services.recipe_store import RecipeStore

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # A load failure propagates and aborts startup
    store = RecipeStore.from_path(settings.recipes_path)
    app.state.recipe_service = RecipeService(store, GeminiGenerationClient.from_settings(settings))
    log.info(f"Recipe service ready with model {settings.gemini_default_model}")
    yield


app = FastAPI(
    title="recipe-instructions",
    version="0.1.0",
    description="Recipe lookup with generated cooking instructions",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(recipe_router)


@app.get("/api/health")
async def health_check():
    return {"status": "ok", "message": "recipe API is running", "gemini_configured": bool(settings.gemini_api_key)}
