import logging
import logging.config
import re

PII_PATTERNS = [
    # CPF: 123.456.789-00
    re.compile(r"\b\d{3}\.\d{3}\.\d{3}-\d{2}\b"),
    # phone: (11) 98888-7777
    re.compile(r"\(?\b\d{2}\)?[-.\s]?\d{4,5}[-.\s]?\d{4}\b"),
    # RG: 12.345.678-9 / AB.123.456
    re.compile(r"\b[A-Za-z]{0,2}\.?\d{1,3}(?:\.\d{3}){1,2}(?:-[0-9Xx])?\b"),
    # bare document numbers
    re.compile(r"\b\d{6,}\b"),
    re.compile(r"(?i)(raw_value\s*[=:]\s*)([^,\s]+)"),
]


class PIISafeFilter(logging.Filter):
    def _sanitize(self, value: object) -> object:
        if not isinstance(value, str):
            return value

        redacted = value
        for pattern in PII_PATTERNS:
            if "raw_value" in pattern.pattern.lower():
                redacted = pattern.sub(r"\1[REDACTED]", redacted)
            else:
                redacted = pattern.sub("[REDACTED]", redacted)
        return redacted

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = self._sanitize(record.msg)

        if isinstance(record.args, tuple):
            record.args = tuple(self._sanitize(item) for item in record.args)
        elif isinstance(record.args, dict):
            record.args = {key: self._sanitize(value) for key, value in record.args.items()}

        return True


def setup_logging() -> None:
    from personal_data_hook.core.settings import get_settings

    settings = get_settings()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "pii_safe": {
                    "()": "personal_data_hook.core.logging.PIISafeFilter",
                }
            },
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "filters": ["pii_safe"],
                }
            },
            "loggers": {
                "": {
                    "handlers": ["console"],
                    "level": settings.log_level.upper(),
                },
                "uvicorn.access": {
                    "handlers": ["console"],
                    "level": "WARNING",
                    "propagate": False,
                },
            },
        }
    )
