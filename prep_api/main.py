import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi import _rate_limit_exceeded_handler
import sentry_sdk

from prep_api.api.v1.health import router as health_router
from prep_api.api.v1.resume import router as resume_router
from prep_api.api.v1.mcq import router as mcq_router
from prep_api.api.v1.interview import router as interview_router
from prep_api.core.cors import cors_allowed_origins
from prep_api.core.handlers import register_error_handlers
from prep_api.core.rate_limit import limiter
from prep_api.core.config import settings
from prep_api.core.lifespan import lifespan

logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s %(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="Interview Prep API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allowed_origins(),
    allow_credentials=True,
    allow_methods=["POST", "GET", "OPTIONS"],
    allow_headers=["*"],
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)
register_error_handlers(app)

app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(resume_router, prefix="/v1", tags=["Resume"])
app.include_router(mcq_router, prefix="/v1", tags=["MCQ"])
app.include_router(interview_router, prefix="/v1", tags=["Interview"])
