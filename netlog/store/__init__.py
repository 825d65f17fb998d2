"""
Storage abstractions for netlog.

Includes:
- ValueNotifier: single observable value with synchronous listeners
- LogStore: newest-first, in-memory list of LogEntry values
"""
