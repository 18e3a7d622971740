import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = "INFO"):
    """Configure root logging once for the application process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # passlib is chatty about optional backends at DEBUG level
    logging.getLogger("passlib").setLevel(logging.WARNING)
