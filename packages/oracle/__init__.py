from .client import OracleClient, parse_feedback, DEFAULT_URL, DEFAULT_TIMEOUT

__all__ = ["OracleClient", "parse_feedback", "DEFAULT_URL", "DEFAULT_TIMEOUT"]
