# config_local.example.py

"""
Example local overrides.

Usage:
  1) Copy this file to `config_local.py`
  2) Adjust values for your machine
  3) Never commit `config_local.py` (it is gitignored)

Prefer `.env` for anything else. Only the names below are read.
"""

# Example: keep the task list in your home directory
# TASKS_PATH = "~/Documents/tasks.txt"

# Example: more verbose console logs while debugging
# LOG_LEVEL = "DEBUG"

# Example: load settings without starting the console
# CONSOLE_ENABLED = False
