"""Main FastAPI application."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quiz_admin.database import init_db
from quiz_admin.logging_setup import setup_console_logging
from quiz_admin.routes import content, questions, quizzes

setup_console_logging()

app = FastAPI(title="Quiz Content Admin API")

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# Startup events
@app.on_event("startup")
def startup_events() -> None:
    """Create storage tables on startup."""
    init_db()


@app.get("/api/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


# Include routers
app.include_router(content.router)
app.include_router(questions.router)
app.include_router(quizzes.router)
