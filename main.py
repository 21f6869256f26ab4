# main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from cablequote.routers import auth_router, billing_router, inventory_router, reports_router
from cablequote.core.config import CORS_ORIGINS, LOG_LEVEL
from cablequote.core.db import init_models

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Cable Quotation API",
    description="FastAPI backend for price books, quotations and stock checks",
    version="0.1.0"
)
# CORS setup
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Health check endpoint
@app.get("/", tags=["Health"])
async def health_check():
    return {"status": "ok", "message": "Backend is running"}

# Register routers
app.include_router(auth_router)
app.include_router(inventory_router)
app.include_router(billing_router)
app.include_router(reports_router)


@app.on_event("startup")
async def on_startup():
    await init_models()
