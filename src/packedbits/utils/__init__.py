from __future__ import annotations

from logging import Logger, getLogger
from typing import Any

import attr

#: The numeric level used for trace records. Registered as ``TRACE`` on import of the package.
TRACE = 5


@attr.s(slots=True, frozen=True, kw_only=True)
class LoggerWithTrace:
    """
    Thin wrapper around a :class:`logging.Logger` that adds a ``trace`` level below ``DEBUG``.
    """

    logger: Logger = attr.ib()

    @classmethod
    def get(cls, name: str) -> LoggerWithTrace:
        return LoggerWithTrace(logger=getLogger(name))

    @property
    def trace_enabled(self) -> bool:
        """
        Returns True if trace records would be emitted.
        """

        return self.logger.isEnabledFor(TRACE)

    def debug(self, *args: Any, **kwargs: Any) -> None:
        self.logger.debug(*args, **kwargs)

    def trace(self, message: str, *args: Any, **kws: Any) -> None:
        self.logger.log(TRACE, message, *args, **kws)
