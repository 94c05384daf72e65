# Flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""Package logger for Flagparse."""
import logging

logger: logging.Logger = logging.getLogger("flagparse")
