"""
Constants for the calculator CLI.
Centralized magic numbers and configuration values.
"""

# Configuration
CONFIG_DIRECTORY = "config"
CONFIG_FILENAME = "calculator_config.json"

# Log rotation
LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB per log file
LOG_BACKUP_COUNT = 30  # Rotated files to keep
LOG_EVENT_PAD = 30  # Console renderer event column width

# Output
PANEL_WIDTH = 44  # Width of the profit details panel
