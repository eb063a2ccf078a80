"""Logging filters and formatter for structured (ECS-style) API logs.

- ContextFieldsFilter stamps records with the trace ID, HTTP details and
  the assessment being run
- EndpointFilter drops access log lines for noisy endpoints
- JsonFormatter writes one JSON object per record
"""

import json
import logging

from marine_impact.common.tracing import ctx_assessment, ctx_request, ctx_response, ctx_trace_id


class ContextFieldsFilter(logging.Filter):
    """Adds request and assessment context to log records.

    Fields (only set when known):
    - trace_id: Request trace ID, also nested as trace.id
    - url.full: Full request URL
    - http.request.method / http.response.status_code
    - assessment.type / assessment.structure_type
    """

    def filter(self, record: logging.LogRecord) -> bool:
        trace_id = ctx_trace_id.get()
        # Flat attribute so plain %-style formats can reference it
        record.trace_id = trace_id or "-"
        if trace_id:
            record.trace = {"id": trace_id}

        req = ctx_request.get()
        resp = ctx_response.get()
        http = {}
        if req:
            record.url = {"full": req.get("url")}
            http["request"] = {"method": req.get("method")}
        if resp:
            http["response"] = resp
        if http:
            record.http = http

        assessment = ctx_assessment.get()
        if assessment:
            record.assessment = dict(assessment)

        return True


class EndpointFilter(logging.Filter):
    """Drops records whose message mentions any of the given endpoint paths.

    Args:
        path: Endpoint path to suppress (e.g. "/health")
        paths: Further paths to suppress
    """

    def __init__(self, path: str, *args, paths: list[str] | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self._paths = [path, *(paths or [])]

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        return not any(p in message for p in self._paths)


class JsonFormatter(logging.Formatter):
    """Renders each record as a single-line JSON object with ECS-style keys.

    Context fields set by ContextFieldsFilter (trace, url, http, assessment)
    are included when present.
    """

    CONTEXT_FIELDS = ("trace", "url", "http", "assessment")

    def format(self, record: logging.LogRecord) -> str:
        document = {
            "@timestamp": self.formatTime(record, self.datefmt),
            "log.level": record.levelname,
            "log.logger": record.name,
            "message": record.getMessage(),
        }
        for field in self.CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value:
                document[field] = value
        if record.exc_info:
            document["error.stack_trace"] = self.formatException(record.exc_info)
        return json.dumps(document, default=str)
