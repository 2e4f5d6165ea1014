import json
import logging

# record attributes set by the logging module itself, anything else came in through `extra`
_STANDARD_RECORD_ATTRS = set(vars(logging.LogRecord('', 0, '', 0, '', None, None))) | {'message', 'asctime'}


def configure_logging(level=logging.INFO):
    "Install the JsonFormatter on the root logger, adding a stream handler if there isn't one yet"
    logger = logging.getLogger()
    if not logger.handlers:
        logger.addHandler(logging.StreamHandler())
    for log_handler in logger.handlers:
        log_handler.setFormatter(JsonFormatter())
    logger.setLevel(level)
    return logger


# https://github.com/python/cpython/blob/v3.8.3/Lib/logging/__init__.py#L510
class JsonFormatter(logging.Formatter):
    "Format logging records as one json object per line"

    def __init__(self, extras=None, **kwargs):
        "`extras` is a dict of data to add to every log record"
        self.extras = extras or {}
        super().__init__(**kwargs)

    def format(self, record):
        # `message` first so it leads when tailing the log
        data = {
            'message': record.getMessage(),
            'level': record.levelname,
            **self.extras,
            **{k: v for k, v in vars(record).items() if k not in _STANDARD_RECORD_ATTRS},
            'sourceFile': record.pathname,
            'sourceLine': record.lineno,
        }

        if record.exc_info:
            if not record.exc_text:
                record.exc_text = self.formatException(record.exc_info)
            data['exceptionInfo'] = record.exc_text.split('\n')
        if record.stack_info:
            data['stackInfo'] = record.stack_info.split('\n')
        return json.dumps(data, default=str)
