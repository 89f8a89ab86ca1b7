import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.api.v1.router import router as v1_router
from app.core.config import settings
from app.core.telemetry import setup_telemetry
from app.web.router import router as web_router

logging.basicConfig(level=settings.log_level)

app = FastAPI(title="Haiti Guide", version="0.1.0")

setup_telemetry(app)
app.include_router(v1_router)
app.include_router(web_router)
app.mount(settings.upload_url_prefix, StaticFiles(directory=settings.upload_dir, check_dir=False), name="uploads")
