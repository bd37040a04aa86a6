# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file,
read with python-dotenv). None of these settings change how tasks are stored; all task data
lives in memory and is gone when the process exits.
"""

ENV_VARS = {
    # App / logging
    "TASKMGR_APP_NAME": "App display name shown in the console banner (default: task-manager).",
    "TASKMGR_LOG_LEVEL": "Console log level (default: WARNING, the REPL shares the terminal).",
    "TASKMGR_LOG_TO_FILE": "Write full DEBUG logs to <data_dir>/task_manager.log (true/false, default: true).",
    # Display
    "TASKMGR_DATE_FORMAT": "strftime format for due dates (default: %b %d, %Y).",
    # Paths (gitignored)
    "TASKMGR_DATA_DIR": "Local data directory for the log file (default: .local/task_manager).",
}
