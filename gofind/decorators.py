import functools
import sys
from .cli_logger import logger
from .errors import GofindError

def handle_exceptions(func):
    """Report errors from a gofind command on stderr and exit with status 1."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            logger.warning("Search aborted by user.")
        except GofindError as e:
            logger.error(f"Error: {e}")
        except OSError as e:
            logger.error(f"Error: {e}")
        except Exception as e:
            logger.error(f"An unexpected error occurred: {e}")
            logger.exception(*sys.exc_info())
        sys.exit(1)
    return wrapper
