"""
netlog: in-memory HTTP request/response log store for a debugging overlay.

This package contains:
- Models (LogEntry + HTTP response schemas)
- Stores (ValueNotifier, LogStore)
- API layer (FastAPI server + routes)
"""
