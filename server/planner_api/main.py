"""Scholarix Planner API - FastAPI application entry point."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .routes import academics, wellness, deadlines, reminders

settings = get_settings()

app = FastAPI(
    title="Scholarix Planner API",
    description="GPA, wellness streak and deadline reminder calculations",
    version="1.0.0",
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

# Include routers
app.include_router(academics.router)
app.include_router(wellness.router)
app.include_router(deadlines.router)
app.include_router(reminders.router)


@app.get("/health")
async def health_check():
    """Health check endpoint for the API."""
    return {"status": "healthy", "service": "planner-api"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "server.planner_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
