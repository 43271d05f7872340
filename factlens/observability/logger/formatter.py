"""
log formatter and adapter that carry the pipeline step of each record.
"""

import logging
from typing import Optional

from factlens.observability.logger.pipeline_step import PipelineStep


class PipelineLogFormatter(logging.Formatter):
    """formatter that tolerates records logged without a pipeline step"""

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "pipeline_step"):
            record.pipeline_step = PipelineStep.UNKNOWN.value

        return super().format(record)


class PipelineLogAdapter(logging.LoggerAdapter):
    """
    logger adapter that stamps every record with a pipeline step.

    an optional prefix (usually a request id) is prepended to each message
    while it is set.
    """

    def __init__(
        self,
        logger: logging.Logger,
        pipeline_step: Optional[PipelineStep] = None,
        extra: Optional[dict] = None
    ):
        self.pipeline_step = pipeline_step or PipelineStep.UNKNOWN
        self._prefix: Optional[str] = None

        extra = dict(extra or {})
        extra["pipeline_step"] = self.pipeline_step.value

        super().__init__(logger, extra)

    def set_prefix(self, prefix: str) -> None:
        """
        prepend `prefix` to every message logged through this adapter.

        example:
            >>> logger = get_logger(__name__, PipelineStep.API_INTAKE)
            >>> logger.set_prefix("[req-8f2k]")
            >>> logger.info("received image upload")
            # output: [req-8f2k] received image upload
        """
        self._prefix = prefix

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        if self._prefix:
            msg = f"{self._prefix} {msg}"

        extra = kwargs.setdefault("extra", {})
        extra.update(self.extra)
        extra["pipeline_step"] = self.pipeline_step.value

        return msg, kwargs
