"""
Static reference tables shown by the add flow and the syntax help.
"""

EXAMPLES_HEADERS = ["Cron Job Example Formats", "Description"]

EXAMPLE_ENTRIES = [
    ["0 * * * * echo 'Hello'", "Every hour"],
    ["0 0 * * * /path/to/backup.sh", "Every day"],
    ["0 0 1 * * pacman -Sc", "Every month"],
    ["0 0 1 1 * sudo pacman -Syu", "Every year"],
    ["*/5 * * * * ping -c 4 google.com", "Every 5 minutes"],
    ["0 2 * * 0 sudo paccache -r", "Every Sunday at 2am"],
    ["0 10 1 * * df -Th | grep -v fs", "Every 1st of the month at 10am"],
    # 2>&1 sends stderr to the same log file
    ["*/2 * * * * command >> /path/to/cron_output.log 2>&1", "Log into a file every 2 minutes"],
]

SYNTAX_TITLE = "Cron Job Syntax Table"
SYNTAX_HEADERS = ["Field", "Allowed Values", "Description"]

SYNTAX_FIELDS = [
    ["min", "0-59", "Minute field"],
    ["hour", "0-23", "Hour field"],
    ["day", "1-31", "Day of the month"],
    ["month", "1-12 or Jan-Dec", "Month field"],
    ["weekday", "0-6 or Sun-Sat", "Day of the week (0 = Sunday)"],
    ["command", "any valid command or script", "The command/script to be executed"],
]

ENTRY_FORMAT_TITLE = "Enter the cron job in the format"

ENTRY_FORMAT = [
    ["min", "hour", "day", "month", "weekday", "command"],
    ["*", "*", "*", "*", "*", "command"],
]
