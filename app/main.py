import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.config import settings, setup_logging
from app.db.postgres import init_db
from app.auth.router import router as auth_router
from app.departments.router import router as departments_router
from app.feedback.router import router as feedback_router
from app.periods.router import router as periods_router, availability_router
from app.question_templates.router import router as question_templates_router
from app.reports.router import router as reports_router

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and seed departments before serving"""
    await init_db()
    logger.info(f"Serving feedback for {len(settings.departments)} departments")
    yield


app = FastAPI(
    title="Department Feedback API",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router)
app.include_router(departments_router)
app.include_router(feedback_router)
app.include_router(periods_router)
app.include_router(availability_router)
app.include_router(question_templates_router)
app.include_router(reports_router)

@app.get("/health")
def health():
    return {"status": "ok"}
