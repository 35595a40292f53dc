import logging
import logging.handlers
import sys
from pathlib import Path
from pythonjsonlogger import jsonlogger
from utils.logger import RequestIDFilter


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter that stamps every entry with location and request fields.
    """
    def add_fields(self, log_record, record, message_dict):
        super(CustomJsonFormatter, self).add_fields(log_record, record, message_dict)

        log_record['timestamp'] = record.created
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['function'] = record.funcName
        log_record['line'] = record.lineno
        # Set by RequestIDFilter from the context of the emitting request
        log_record['request_id'] = getattr(record, "request_id", None)


def _rotating_file_handler(path: Path, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.addFilter(RequestIDFilter())
    return handler


def setup_logging(log_level: str = "INFO", log_dir: str = "logs"):
    """
    Configure application-wide logging.

    Console output is human readable and honours ``log_level``; the files under
    ``log_dir`` receive JSON lines (``app.log`` everything, ``error.log`` errors only).
    """
    log_path = Path(log_dir)
    log_path.mkdir(exist_ok=True)

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    json_formatter = CustomJsonFormatter('%(timestamp)s %(level)s %(logger)s %(message)s')
    console_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(console_formatter)
    console_handler.addFilter(RequestIDFilter())

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # setup_logging may run more than once (reloads, tests)
    root_logger.handlers.clear()

    root_logger.addHandler(console_handler)
    root_logger.addHandler(_rotating_file_handler(log_path / "app.log", logging.DEBUG, json_formatter))
    root_logger.addHandler(_rotating_file_handler(log_path / "error.log", logging.ERROR, json_formatter))

    for noisy in ("uvicorn", "uvicorn.access", "uvicorn.error", "sqlalchemy.engine",
                  "passlib.handlers.bcrypt", "python_multipart.multipart"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    root_logger.info(
        "Logging configured",
        extra={
            "log_level": log_level,
            "log_dir": str(log_path.absolute())
        }
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
