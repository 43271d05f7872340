"""
logging for the fact-check service.

usage:
    >>> from factlens.observability.logger import get_logger, PipelineStep, time_profile
    >>> logger = get_logger(__name__, PipelineStep.SUMMARY)
    >>> logger.info("synthesizing summary")

configuration (environment):
    - LOG_LEVEL: DEBUG, INFO, WARN, ERROR (default: INFO)
    - LOG_OUTPUT: STDOUT, FILE, BOTH (default: STDOUT)
    - LOG_DIR: directory for file logs (default: logs)
    - LOG_FILE_MAX_BYTES / LOG_FILE_BACKUP_COUNT: rotation
    - LOG_ORGANIZE_BY_STEP / LOG_CREATE_SESSION_FOLDER: file layout
"""

from factlens.observability.logger.config import LoggerConfig, get_logger_config
from factlens.observability.logger.logger import (
    get_logger,
    get_request_logger,
    get_session_log_dir,
    setup_logging,
)
from factlens.observability.logger.pipeline_step import PipelineStep
from factlens.observability.logger.decorators import time_profile

__all__ = [
    "get_logger",
    "get_request_logger",
    "setup_logging",
    "get_session_log_dir",
    "PipelineStep",
    "LoggerConfig",
    "get_logger_config",
    "time_profile",
]
