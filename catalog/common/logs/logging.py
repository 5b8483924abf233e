import logging, sys
from pythonjsonlogger.json import JsonFormatter
from opentelemetry import trace
from catalog.common.config import Config

__all__ = ['CatalogJsonFormatter', 'OTLPJsonFormatter', 'LOGGER_LEVELS', 'build_formatter', 'configure_logger', 'init_loggers']

TEXT_FORMAT = "[%(asctime)s] %(levelname)-8s | %(name)s | %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

#Loggers owned by the app. Storage logs one DEBUG line per write, so it stays on INFO
LOGGER_LEVELS = {
    'catalog': logging.DEBUG,
    'catalog.storage': logging.INFO,
}


class CatalogJsonFormatter(JsonFormatter):
    """One JSON object per line, `level`/`logger` instead of the stdlib attribute names.

    Service name and environment do not change during the process lifetime and go in as static fields.
    """
    def __init__(self, *args, **kwargs):
        kwargs.setdefault('rename_fields', {'levelname': 'level', 'name': 'logger'})
        kwargs.setdefault('static_fields', {'service': Config.APP_NAME, 'env': Config.MODE})
        super().__init__(*args, **kwargs)

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['pid'] = record.process


class OTLPJsonFormatter(CatalogJsonFormatter):
    def __init__(self, *args, trace_provider=None, **kwargs):
        '''`trace_provider` is anything with `get_current_span()`, the opentelemetry API by default'''
        super().__init__(*args, **kwargs)
        self._trace_provider = trace_provider or trace

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        ctx = self._trace_provider.get_current_span().get_span_context()
        if ctx.is_valid:
            log_record['trace_id'] = trace.format_trace_id(ctx.trace_id)
            log_record['span_id'] = trace.format_span_id(ctx.span_id)


def build_formatter() -> logging.Formatter:
    if Config.JSON_LOGS == 1:
        return OTLPJsonFormatter(JSON_FORMAT)
    return logging.Formatter(TEXT_FORMAT, datefmt="%H:%M:%S")


def configure_logger(name: str, stream=sys.stdout, level: int = logging.DEBUG) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(build_formatter())
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def init_loggers():
    for name, level in LOGGER_LEVELS.items():
        configure_logger(name, level=level)
    access = logging.getLogger("uvicorn.access")
    access.handlers.clear()
    access.propagate = False
