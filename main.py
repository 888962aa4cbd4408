import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from starlette.middleware.cors import CORSMiddleware

from services.school_registry.controllers.school_service import router as school_router
from shared.config import get_config
from shared.db import close_db, init_db
from shared.exceptions import register_exception_handlers
from shared.logging_config import setup_logging

config = get_config()
setup_logging(config)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db(config.database)
    logger.info("School Management API starting")
    yield
    await close_db()


app = FastAPI(title="School Management API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/", response_class=PlainTextResponse)
def health_check():
    return "School Management API is running"


app.include_router(school_router)


if __name__ == "__main__":
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
