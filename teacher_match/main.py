from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from teacher_match.config import settings
from teacher_match.db import init_db
from teacher_match.logging_config import configure_logging
from teacher_match.routers import health, match_teachers, teachers


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    init_db()
    yield


app = FastAPI(title=settings.app_name, lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/api")
app.include_router(match_teachers.router, prefix="/api")
app.include_router(teachers.router, prefix="/api")
