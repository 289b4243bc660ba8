import logging, sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"

def setup_logging(level: str = "INFO"):
    """Root stdout handler for the service. Safe to call again on reload."""
    root = logging.getLogger()
    if root.handlers:  # uvicorn --reload imports main twice
        return
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    # every SharePoint page request would otherwise log a connection line
    logging.getLogger("urllib3").setLevel(logging.WARNING)
