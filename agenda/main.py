from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
import logging
from contextlib import asynccontextmanager

from .config import AGENDA_PATH, CORS_ORIGINS, PORT, STATIC_DIR, STATIC_URL
from .database import backing_store
from .gate import access_gate, availability_gate
from .auth import auth_router
from .homework import homework_router

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Probe the backing store once; requests are refused until it is ready."""
    logger.info("Starting up homework agenda...")
    if backing_store.ready:
        logger.info("Backing store already marked ready")
    elif backing_store.connect():
        logger.info("Backing store ready")
    else:
        logger.error("Backing store unavailable, every request will get 503")
    yield
    logger.info("Shutting down homework agenda...")

app = FastAPI(
    title="Homework Agenda",
    description="Personal homework agenda behind GitHub login",
    version="0.1.0",
    lifespan=lifespan,
)

# Middleware added last runs first: availability, then CORS, then access
app.middleware("http")(access_gate)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(availability_gate)

# Routers
app.include_router(auth_router)
app.include_router(homework_router)

@app.get("/")
async def root():
    """Public landing page."""
    return FileResponse(STATIC_DIR / "index.html")

@app.get(AGENDA_PATH)
async def agenda_page():
    """Agenda page; only reachable with a session."""
    return FileResponse(STATIC_DIR / "agenda.html")

if __name__ == "__main__":
    import uvicorn
    logger.info(f"Listening on port {PORT}, public URL {STATIC_URL}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
