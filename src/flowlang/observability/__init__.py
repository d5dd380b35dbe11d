from .logging_utils import configure_logging, redact_headers, redact_url

__all__ = ["configure_logging", "redact_headers", "redact_url"]
