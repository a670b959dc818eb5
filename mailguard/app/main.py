# mailguard/app/main.py
from fastapi import FastAPI

from ..config import settings
from .routers import uploads, validate

app = FastAPI(title=settings.APP_NAME)

# ---------------------------------------------------
# Health check
# ---------------------------------------------------
@app.get("/health", tags=["health"])
async def health():
    return {"status": "ok"}

# ---------------------------------------------------
# Routers
# ---------------------------------------------------
app.include_router(validate.router, tags=["validate"])
app.include_router(uploads.router, prefix="/uploads", tags=["uploads"])
