# logger.py

import os, logging
from typing import Optional
from functools import partial

from rich.console import Console
from rich.logging import RichHandler

class Logger:
    def __init__(self, name: str, logging_enabled: bool = False,
                 log_file: Optional[str] = None):
        """
        Wrap a named logger.

        Args:
            name: Logger name, usually the calling module's __name__.
            logging_enabled: Attach a handler at DEBUG level.
            log_file: Path to a log file. Use "-" for stderr.
        """
        self._logger = logging.getLogger(name)
        if logging_enabled:
            self._logger.setLevel(logging.DEBUG)
            # Rebuilding a Logger for the same name must not duplicate output
            if log_file == "-":
                if not self._has_handler(lambda h: isinstance(h, RichHandler)):
                    handler = RichHandler(console=Console(stderr=True),
                                          show_path=False, markup=False)
                    handler.setFormatter(logging.Formatter('%(message)s'))
                    self._logger.addHandler(handler)
            else:
                path = os.path.abspath(log_file or os.path.join(os.getcwd(), 'termtone_debug.log'))
                if not self._has_handler(lambda h: isinstance(h, logging.FileHandler)
                                         and h.baseFilename == path):
                    handler = logging.FileHandler(path)
                    handler.setFormatter(logging.Formatter(
                        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
                    self._logger.addHandler(handler)
        elif not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    def _has_handler(self, matches) -> bool:
        return any(matches(handler) for handler in self._logger.handlers)

    @property
    def name(self) -> str:
        return self._logger.name

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
