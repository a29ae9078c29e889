# Commander CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Package logger shared by all Commander modules."""
import logging

logger: logging.Logger = logging.getLogger("commander")
