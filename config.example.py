# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use:
- .env (local, gitignored)
- config_local.py (local safe overrides, gitignored)

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKLET_APP_NAME": "Name the assistant introduces itself with (default: tasklet).",
    "TASKLET_LOG_LEVEL": "Console (stderr) logging level (default: WARNING).",
    "TASKLET_LOG_TO_FILE": "Also write <data_dir>/tasklet.log at DEBUG level (true/false, default: true).",
    # Connectors
    "TASKLET_CONSOLE_ENABLED": "Run the console connector (true/false, default: true).",
    # Paths (gitignored)
    "TASKLET_DATA_DIR": "Local data directory (default: .local/tasklet).",
    "TASKLET_TASKS_PATH": "Task list file, one record per line (default: <data_dir>/tasks.txt).",
}
