import logging
import sys
from pythonjsonlogger import jsonlogger

PLAIN_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'

class CustomJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super(CustomJsonFormatter, self).add_fields(log_record, record, message_dict)
        if not log_record.get('timestamp'):
            log_record['timestamp'] = record.created
        if log_record.get('level'):
            log_record['level'] = log_record['level'].upper()
        else:
            log_record['level'] = record.levelname

        log_record['module'] = record.module
        log_record['lineno'] = record.lineno


def _has_engine_handler(root_logger: logging.Logger) -> bool:
    return any(getattr(h, '_disc_engine', False) for h in root_logger.handlers)


def setup_logging(log_level_str: str = "INFO", json_format: bool = True):
    """
    Configures logging for the engine.

    Records go to stderr so that report output on stdout stays machine-readable.
    Calling it again only updates the level.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if _has_engine_handler(root_logger):
        root_logger.debug(f"Logging already configured. Current level: {logging.getLevelName(log_level)}")
        return

    log_handler = logging.StreamHandler(sys.stderr)
    if json_format:
        formatter = CustomJsonFormatter('%(timestamp)s %(level)s %(name)s %(module)s %(lineno)d %(message)s')
    else:
        formatter = logging.Formatter(PLAIN_FORMAT)
    log_handler.setFormatter(formatter)
    log_handler._disc_engine = True
    root_logger.addHandler(log_handler)
    root_logger.debug(f"Logging configured with level: {logging.getLevelName(log_level)}")
