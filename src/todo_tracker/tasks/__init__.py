"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Urgency, TaskCounts)
- task_store.py: in-memory store + query/update helpers + export
- exporters.py: text/CSV/JSON renderers and CSV/JSON readers
- audit_log.py: append-only action log file
"""
