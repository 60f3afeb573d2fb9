from urllib.parse import urlparse

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from app.api.exception_handlers import register_exception_handlers
from app.api.v1.router import api_router
from app.core.activity_log import ActivityLog
from app.core.config import settings
from app.domain.notifications import AppointmentNotifier

app = FastAPI(title="Veterinary Clinic Records")

# Process-wide collaborators, reached through app.state by the dependencies.
activity_log = ActivityLog()
app.state.activity_log = activity_log
app.state.notifier = AppointmentNotifier(
    activity_log, isolate_failures=settings.notify_isolate_failures
)

if settings.frontend_url:
    parsed = urlparse(settings.frontend_url)
    origin = f"{parsed.scheme}://{parsed.netloc}"
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_exception_handlers(app)
app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
def health():
    return {"status": "ok"}
