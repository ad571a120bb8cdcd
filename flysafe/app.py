"""
Main FastAPI application
"""
from datetime import datetime

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flysafe.core.config import API_CONFIG, CORS_ORIGINS
from flysafe.core.utils import get_logger
from flysafe.models import ApiInfoResponse, HealthResponse
from flysafe.routers import aircraft, airports, safety

# Initialize logger
logger = get_logger("main")

# Initialize FastAPI app
app = FastAPI(
    title=API_CONFIG["title"],
    version=API_CONFIG["version"],
    description=API_CONFIG["description"]
)

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(safety.router, tags=["safety"])
app.include_router(airports.router, tags=["airports"])
app.include_router(aircraft.router, tags=["aircraft"])


@app.get("/", response_model=ApiInfoResponse)
async def root():
    """Root endpoint - API status"""
    return ApiInfoResponse(
        message="FlySafe API is running!",
        version=API_CONFIG["version"],
        status="healthy"
    )


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint"""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now().isoformat()
    )


def main():
    logger.info("Starting FlySafe API server", extra={
        "host": "0.0.0.0",
        "port": 8000,
        "api_url": "http://localhost:8000",
        "docs_url": "http://localhost:8000/docs"
    })
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        reload=False  # Set to True for development
    )


if __name__ == "__main__":
    main()
