from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from planner import __version__
from planner.api.routes import router
from planner.config import CORS_ORIGINS

app = FastAPI(
    title="Project Blueprint Planner",
    version=__version__,
)

# Middleware FIRST
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes AFTER middleware
app.include_router(router)
