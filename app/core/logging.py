from pathlib import Path
import logging
import logging.config

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# logger name -> file it writes to besides the console; None is the root logger
LOG_FILES = {
    None: "app.log",
    "store": "store.log",
    "quiz": "app.log",
}


def _file_handler(path: Path, level: str) -> dict:
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "formatter": "default",
        "level": level,
        "filename": str(path),
        "maxBytes": 5 * 1024 * 1024,
        "backupCount": 3,
        "encoding": "utf-8",
    }


def build_logging_config(log_level: str, log_dir: Path) -> dict:
    level = log_level.upper()
    handlers = {
        "console": {"class": "logging.StreamHandler", "formatter": "default", "level": level},
    }
    for filename in set(LOG_FILES.values()):
        handlers[Path(filename).stem] = _file_handler(log_dir / filename, level)

    def attach(filename: str) -> list[str]:
        return ["console", Path(filename).stem]

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": {"format": LOG_FORMAT}},
        "handlers": handlers,
        "root": {"level": level, "handlers": attach(LOG_FILES[None])},
        "loggers": {
            name: {"level": level, "handlers": attach(filename), "propagate": False}
            for name, filename in LOG_FILES.items()
            if name is not None
        },
    }


def configure_logging(log_level: str = "INFO", log_dir: Path = Path("logs")):
    log_dir.mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(build_logging_config(log_level, log_dir))
