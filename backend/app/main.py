import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .exceptions import APIError, api_error_handler
from .routers import ui, validate

# Logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(message)s",
)

app = FastAPI(title=settings.APP_NAME)

# ---------------------------------------------------
# CORS
# ---------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# ---------------------------------------------------
# Errors are returned as {"error": "..."}
# ---------------------------------------------------
app.add_exception_handler(APIError, api_error_handler)

# ---------------------------------------------------
# Health check
# ---------------------------------------------------
@app.get("/health", tags=["health"])
async def health():
    return {"status": "ok"}

# ---------------------------------------------------
# Routers
# ---------------------------------------------------
app.include_router(validate.router, prefix="/api", tags=["validate"])
app.include_router(ui.router, tags=["ui"])

# ---------------------------------------------------
# Note:
# Start with `uvicorn app.main:app` from the backend/ directory;
# the app does not call uvicorn.run() itself.
# ---------------------------------------------------
