"""
Tubely - video and thumbnail asset service
Main FastAPI application entry point
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tubely.api.router import api_router
from tubely.core.config import settings
from tubely.core.database import init_db

logger = logging.getLogger(__name__)

def configure_logging():
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    Path(settings.assets_root).mkdir(parents=True, exist_ok=True)
    init_db()
    logger.info(f"{settings.app_name} ready, assets at {settings.assets_root}")
    yield

app = FastAPI(
    title="Tubely",
    description="Video and thumbnail asset service",
    version="0.1.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router
app.include_router(api_router, prefix="/api")

@app.get("/health")
async def health_check():
    return {"status": "healthy", "service": "tubely"}

if __name__ == "__main__":
    import uvicorn
    configure_logging()
    uvicorn.run(app, host=settings.host, port=settings.port)
