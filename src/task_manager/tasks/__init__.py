"""
Task subsystem.

Components:
- task_models.py: data structures (Priority, Task) + task list codec (DecodeResult)
- task_store.py: in-memory sorted list with write-through persistence
"""
