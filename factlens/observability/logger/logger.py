"""
logger factory for the fact-check service.

when file logging is on, records are split by pipeline step:
- logs/<session timestamp>/claim_review_search.log
- logs/<session timestamp>/summary.log
- ...one file per PipelineStep value
"""

import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, Optional

from factlens.observability.logger.config import LoggerConfig, get_logger_config
from factlens.observability.logger.formatter import PipelineLogAdapter, PipelineLogFormatter
from factlens.observability.logger.pipeline_step import PipelineStep


_logging_initialized = False
_session_timestamp: Optional[str] = None
_pipeline_handlers: Dict[str, RotatingFileHandler] = {}

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


class PipelineStepFilter(logging.Filter):
    """lets through only records tagged with one pipeline step"""

    def __init__(self, pipeline_step: str):
        super().__init__()
        self.pipeline_step = pipeline_step

    def filter(self, record: logging.LogRecord) -> bool:
        return getattr(record, "pipeline_step", PipelineStep.UNKNOWN.value) == self.pipeline_step


def _get_session_timestamp() -> str:
    """timestamp of the first logging setup in this process (YYYY-MM-DD_HH-MM-SS)"""
    global _session_timestamp

    if _session_timestamp is None:
        _session_timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")

    return _session_timestamp


def _base_log_dir(config: LoggerConfig) -> Path:
    base_dir = Path(config.log_dir)
    if config.create_session_folder:
        base_dir = base_dir / _get_session_timestamp()
    return base_dir


def _rotating_handler(log_file: Path, config: LoggerConfig, formatter: logging.Formatter) -> RotatingFileHandler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        filename=str(log_file),
        maxBytes=config.log_file_max_bytes,
        backupCount=config.log_file_backup_count,
        encoding="utf-8"
    )
    handler.setFormatter(formatter)
    return handler


def _get_or_create_pipeline_handler(
    pipeline_step: str,
    config: LoggerConfig,
    formatter: PipelineLogFormatter
) -> RotatingFileHandler:
    """one handler per step, reused across setup calls"""
    if pipeline_step not in _pipeline_handlers:
        handler = _rotating_handler(
            _base_log_dir(config) / f"{pipeline_step}.log", config, formatter
        )
        handler.addFilter(PipelineStepFilter(pipeline_step))
        _pipeline_handlers[pipeline_step] = handler

    return _pipeline_handlers[pipeline_step]


def setup_logging() -> None:
    """
    configure the root logger from the environment.

    call once at startup; later calls are no-ops.
    """
    global _logging_initialized

    if _logging_initialized:
        return

    config = get_logger_config()

    root_logger = logging.getLogger()
    root_logger.setLevel(_LEVELS.get(config.log_level, logging.INFO))
    root_logger.handlers.clear()

    formatter = PipelineLogFormatter(
        fmt=config.log_format,
        datefmt=config.log_date_format
    )

    if config.log_output in ("STDOUT", "BOTH"):
        stdout_handler = logging.StreamHandler()
        stdout_handler.setFormatter(formatter)
        root_logger.addHandler(stdout_handler)

    if config.log_output in ("FILE", "BOTH"):
        if config.organize_by_pipeline_step:
            for step in PipelineStep:
                root_logger.addHandler(
                    _get_or_create_pipeline_handler(step.value, config, formatter)
                )
        else:
            root_logger.addHandler(
                _rotating_handler(Path(config.log_dir) / "app.log", config, formatter)
            )

    _logging_initialized = True


def get_logger(
    name: str,
    pipeline_step: Optional[PipelineStep] = None
) -> PipelineLogAdapter:
    """
    get a logger tagged with a pipeline step.

    example:
        >>> logger = get_logger(__name__, PipelineStep.CLAIM_REVIEW_SEARCH)
        >>> logger.info("searching claim reviews")
        # 2026-10-17 12:00:00 | INFO  | claim_review_search | factlens.ai.main_pipeline | searching claim reviews
    """
    if not _logging_initialized:
        setup_logging()

    return PipelineLogAdapter(
        logger=logging.getLogger(name),
        pipeline_step=pipeline_step or PipelineStep.UNKNOWN
    )


def get_request_logger(
    name: str,
    pipeline_step: Optional[PipelineStep] = None,
    request_id: Optional[str] = None
) -> PipelineLogAdapter:
    """
    get a logger for one request; messages are prefixed with the request id.

    example:
        >>> logger = get_request_logger(__name__, PipelineStep.API_INTAKE, "8f2kq0a1b3cd")
        >>> logger.info("received text claim")
        # ... | api_intake | factlens.api.endpoints.fact_check | [8f2kq0a1b3cd] received text claim
    """
    if not _logging_initialized:
        setup_logging()

    extra = {"request_id": request_id} if request_id else {}
    adapter = PipelineLogAdapter(
        logger=logging.getLogger(name),
        pipeline_step=pipeline_step or PipelineStep.UNKNOWN,
        extra=extra
    )
    if request_id:
        adapter.set_prefix(f"[{request_id}]")
    return adapter


def get_session_log_dir() -> Optional[Path]:
    """directory this process writes step logs into, or None before setup"""
    if not _logging_initialized:
        return None

    return _base_log_dir(get_logger_config())
