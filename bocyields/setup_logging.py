import logging, sys

def setup_logging(level: str = "INFO"):
    logger = logging.getLogger()
    if logger.handlers:  # already configured (uvicorn reload, pytest)
        return
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    h = logging.StreamHandler(sys.stdout)
    h.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s :: %(message)s"
    ))
    logger.addHandler(h)
    # requests/urllib3 log every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)
