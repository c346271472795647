"""
Task subsystem.

Components:
- task_models.py: task variants, date-time parsing and the type-keyed builders
- task_store.py: flat text file storage (one record line per task)
- task_list.py: the ordered in-memory list and its user-facing operations
"""
