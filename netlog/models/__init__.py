"""
Pydantic models used by netlog.

Split into:
- log_models: LogEntry and its payload mapping
- api_models: HTTP response schemas
"""
