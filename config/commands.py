"""
Configuration for the external commands launched by the Project Launcher
"""

# Consolidated commands dictionary - all commands accessible via COMMANDS["command_name"]
COMMANDS = {
    # Run tool invoked for the selected project
    "RUN_COMMANDS": {
        "run": ["cargo", "shuttle", "run"],
    },
}

# Exit statuses reported when the run tool cannot be started, matching POSIX shells
EXIT_CODES = {
    "not_executable": 126,
    "not_found": 127,
    "signal_base": 128,
    "interrupted": 130,
}
