# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Nothing needs to be set: without any variable the task list is kept in
./data/nebulaTaskList.txt.
"""

ENV_VARS = {
    # App / logging
    "NEBULA_APP_NAME": "Name used in the greeting (default: Nebula).",
    "NEBULA_LOG_LEVEL": "Console (stderr) logging level (default: WARNING).",
    "NEBULA_LOG_DIR": "Directory for nebula.log, full DEBUG log (default: .local/nebula).",
    # Task file
    "NEBULA_DATA_DIR": "Directory holding the task file (default: data).",
    "NEBULA_TASKS_FILE": "Task file path (default: <data_dir>/nebulaTaskList.txt).",
}
