# ==================================================================================================
#                                   Logging
# ==================================================================================================
#
# Tiny logging bootstrap used by the CLI entrypoint. Library modules only call
# `logging.getLogger(__name__)`; handlers and format are configured here once.

import logging

DEFAULT_FORMAT: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """
    Configure global logging once.

    Parameters
    ----------
    level
        Logging level.

    Usage example
    -------------
        configure_logging(logging.DEBUG)
        logging.getLogger("themekit.themes.compose").debug("hello")
    """
    # Repeated calls keep existing handlers (no `force=True`) so embedding
    # applications keep their own logging setup.
    logging.basicConfig(
        level=level,
        format=DEFAULT_FORMAT,
    )
