"""Default configuration values."""
from typing import Any, Dict

CONFIG_ENV_VAR = "PATTERN_CATALOG_CONFIG"

# Environment variables that override single configuration keys
ENV_OVERRIDES = {
    "PATTERN_CATALOG_LOG_LEVEL": ("logging", "level"),
    "PATTERN_CATALOG_OUTPUT_FORMAT": ("output", "format"),
}

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    "environment": "${PATTERN_CATALOG_ENV:development}",
    "logging": {
        "level": "WARNING",
        "destination": "console",
        "file_path": "${PATTERN_CATALOG_LOG_DIR:logs}/pattern_catalog.log",
        "max_size_mb": 10,
        "backup_count": 5,
        "renderer": "console",
    },
    "output": {
        "format": "text",
        "show_headers": True,
        "width": 100,
    },
}
