from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import os
from dotenv import load_dotenv

from db import Base, engine
from discovery import models as _discovery_models  # noqa: F401  registers tables on Base
from discovery.logic.constants import ENGINE_VERSION
from discovery.routes import router as discovery_router

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
logging.info(f"Contact discovery engine {ENGINE_VERSION} starting (log level {LOG_LEVEL})")

app = FastAPI(title="Contact Discovery")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

Base.metadata.create_all(bind=engine)

app.include_router(discovery_router)


@app.get("/health", tags=["meta"])
def health():
    return {"status": "ok"}
