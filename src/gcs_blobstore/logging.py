import logging
import sys

from pythonjsonlogger import jsonlogger


def setup_logging(level: int = logging.INFO):
    """
    Configures structured JSON logging for an application using the blob store.

    Installs a JSON formatter that includes timestamp, level, logger name and
    message on a stdout stream handler, replacing any existing handlers on the
    root logger. Context passed through ``extra`` (bucket_name, object_key, ...)
    is emitted as additional JSON fields.

    Args:
        level: Log level applied to the root logger.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    formatter = jsonlogger.JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    return root_logger
