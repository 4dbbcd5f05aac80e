from datetime import datetime, timezone
import functools
import inspect
import json
import logging
import logging.handlers
import os
import pathlib
import traceback
from typing import Callable, Dict, List, Optional, Union


class ListLogger:
    """Wraps a logging.Logger so that it's easy to use str.format syntax."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def debug(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        self._log(logging.DEBUG, format_string, args, kwargs)

    def info(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        self._log(logging.INFO, format_string, args, kwargs)

    def warning(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        self._log(logging.WARNING, format_string, args, kwargs)

    def error(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        self._log(logging.ERROR, format_string, args, kwargs)

    def _log(
        self,
        level: int,
        format_string: str,
        args: tuple,
        kwargs: Dict[str, object],
    ) -> None:
        # Only walk the stack for enabled levels.
        if not self._logger.isEnabledFor(level):
            return
        # Frame 0 is this method, frame 1 the public level method.
        caller = inspect.stack(context=0)[2]
        _log(
            functools.partial(self._logger.log, level),
            format_string,
            caller,
            list(args),
            kwargs,
        )


class _LogRecordEncoder(json.JSONEncoder):
    """A JSON Encoder that supports logging.LogRecord objects."""

    def default(self, obj: object):
        if isinstance(obj, logging.LogRecord):
            caller = getattr(obj, 'caller', None)
            if caller is None:
                path_name, line_number, function_name, module = (
                    obj.pathname,
                    obj.lineno,
                    obj.funcName,
                    obj.module,
                )
            else:
                path_name, line_number, function_name = (
                    caller.filename,
                    caller.lineno,
                    caller.function,
                )
                module = caller.frame.f_globals['__name__']
            return {
                'name': obj.name,
                'message': obj.getMessage(),
                # arguments for the formatting string don't need to be in the JSON
                'level_name': obj.levelname,
                'path_name': path_name,
                'file_name': pathlib.Path(path_name).name,
                'module': module,
                'exception': (
                    traceback.format_exception(*obj.exc_info)
                    if obj.exc_info
                    else None
                ),
                'line_number': line_number,
                'function_name': function_name,
                'created': datetime.fromtimestamp(
                    obj.created, timezone.utc
                ).isoformat(),
                'thread': obj.thread,
                'thread_name': obj.threadName,
                'process_name': obj.processName,
                'process': obj.process,
            }
        return super().default(obj)


class _JSONFormatter(logging.Formatter):
    """A logging formatter for producing structured JSON logs."""

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(record, cls=_LogRecordEncoder)


_installed_handler: Optional[logging.Handler] = None


def init_logging(
    path: Union[str, os.PathLike, None] = None, level: int = logging.WARNING
) -> logging.Handler:
    """Send the package's logs, as JSON lines, to path or to stderr.

    A handler installed by an earlier call is removed first.
    """
    global _installed_handler

    handler: logging.Handler
    if path is None:
        handler = logging.StreamHandler()
    else:
        handler = logging.handlers.RotatingFileHandler(
            path, maxBytes=1048576, backupCount=1
        )
    handler.setFormatter(_JSONFormatter())
    logger = logging.getLogger('conslist')
    if _installed_handler is not None:
        logger.removeHandler(_installed_handler)
        _installed_handler.close()
    logger.addHandler(handler)
    logger.setLevel(level)
    _installed_handler = handler
    return handler


def _log(
    logging_method: Callable,
    format_string: str,
    caller: inspect.FrameInfo,
    args: List[object],
    kwargs: Dict[str, object],
) -> None:
    exc_info = None
    if 'exc_info' in kwargs:
        exc_info = kwargs['exc_info']
        del kwargs['exc_info']
    logging_method(
        _DelayedFormat(format_string, args, kwargs),
        exc_info=exc_info,
        extra={'caller': caller},
    )


class _DelayedFormat:
    def __init__(
        self, format_string: str, args: List[object], kwargs: Dict[str, object]
    ) -> None:
        self._format_string, self._args, self._kwargs = (
            format_string,
            args,
            kwargs,
        )

    def __str__(self) -> str:
        return self._format_string.format(*self._args, **self._kwargs)
