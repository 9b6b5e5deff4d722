"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pci_forecast.api.routes import projections
from pci_forecast.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="PCI Forecast",
    description="Pavement condition projection and maintenance budget engine",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(projections.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
