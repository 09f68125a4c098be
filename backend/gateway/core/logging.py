import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LEVEL_NAMES = ("critical", "error", "warning", "info", "debug")

def resolve_level(name: str) -> str:
    """Lower-case level name understood by both logging and uvicorn; unknown names become "info"."""
    name = name.strip().lower()
    return name if name in LEVEL_NAMES else "info"

def configure_logging(level_name: str = "info") -> None:
    level = logging.getLevelName(resolve_level(level_name).upper())
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
