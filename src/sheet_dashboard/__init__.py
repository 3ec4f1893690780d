import logging

logger = logging.getLogger(__name__)

__version__ = "0.1.0"
