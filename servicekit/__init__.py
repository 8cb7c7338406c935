"""Building blocks for HTTP services: headers, error codes, environment access, audit payloads and response envelopes."""

__version__ = "0.1.0"

__all__ = [
    "api_constant",
    "api_context",
    "audit",
    "base_response",
    "env",
    "json_response",
]