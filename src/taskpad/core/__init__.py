"""
Core pieces shared by the task subsystem and the CLI.

- errors.py: user-facing error kinds
- ports.py: storage Protocol the task list depends on
- state.py: AppState passed to command handlers
"""
