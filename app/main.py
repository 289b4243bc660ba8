import uvicorn
from fastapi import FastAPI

from app import settings
from app.routers.employees import router as employees_router
from app.setup_logging import setup_logging

# --------------------------------------------------------------------
# App bootstrap
# --------------------------------------------------------------------
setup_logging(settings.LOG_LEVEL) # Init Logging

# Nothing is persisted: every request reads the SharePoint list again.
app = FastAPI(title="Employee Directory")

# --------------------------------------------------------------------
# Routes
# --------------------------------------------------------------------
@app.get("/healthz")
def health():
    """
    Simple health probe for monitoring.
    Does not touch SharePoint; only reports which list the service reads.
    """
    return {
        "ok": True,
        "service": "employee-directory",
        "version": 1,
        "list_name": settings.SP_LIST_NAME,
        "site_configured": bool(settings.SP_SITE_URL),
    }

# Register API routers:
app.include_router(employees_router)


def run():
    """Console entry point (`employee-directory`): serve the API with uvicorn."""
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)
