from __future__ import annotations

import logging

import orjson


# Attributes every LogRecord carries; anything else arrived through `extra=`.
_RECORD_ATTRS = set(vars(logging.makeLogRecord({}))) | {'message', 'asctime'}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'time': self.formatTime(record, datefmt='%Y-%m-%dT%H:%M:%S%z'),
        }
        if record.exc_info:
            payload['exc_info'] = self.formatException(record.exc_info)
        payload.update((k, v) for k, v in vars(record).items() if k not in _RECORD_ATTRS)
        return orjson.dumps(payload, default=repr).decode()


def configure_logging(level: str = 'INFO', json_output: bool = False) -> None:
    root = logging.getLogger()
    root.setLevel(level)
    handler = logging.StreamHandler()
    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s: %(message)s'))
    root.handlers.clear()
    root.addHandler(handler)

    logging.getLogger('urllib3').setLevel(logging.WARNING)
