# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Keep .env local (gitignored).

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name used in logs (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKLIST_LOG_FILE_ENABLED": "Also write full DEBUG logs to <data_dir>/tasklist.log (default: true).",
    # Presentation
    "TASKLIST_LIST_TITLE": "Heading shown above the list (default: Task List).",
    # Paths (gitignored)
    "TASKLIST_DATA_DIR": "Local data directory (default: .local/tasklist).",
    "TASKLIST_TASKS_DB_PATH": "Task SQLite path (default: <data_dir>/tasks.sqlite3).",
}
