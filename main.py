from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import CORS_ORIGINS, LOG_LEVEL
from assessment.logic import get_answer_key
from assessment.routes import router as quiz_router
from assessment.results_routes import router as results_router

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Load the answer key once at startup so a bad artifact fails fast
    table = get_answer_key()
    logger.info(f"App starting with {len(table)} answer keys")
    yield


app = FastAPI(title="NextStep Assessment API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(quiz_router)
app.include_router(results_router)


@app.get("/health", tags=["meta"], summary="Health check")
def health():
    return {"status": "ok"}
