"""
로깅 설정

uvicorn 접근 로그와 devmatching 패키지 로거의 dictConfig 설정을 만듭니다.
"""
from typing import Any, Dict

APP_LOGGER = "devmatching"


def _stream_handler(formatter: str) -> Dict[str, str]:
    return {
        "formatter": formatter,
        "class": "logging.StreamHandler",
        "stream": "ext://sys.stdout",
    }


def build_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """
    Args:
        level (str): devmatching 로거 레벨 (예: "INFO", "DEBUG")

    Returns:
        dict: logging.config.dictConfig에 넘길 설정
    """
    level = level.upper()
    loggers = {
        "uvicorn.access": {"handlers": ["access"], "level": "INFO", "propagate": False},
        APP_LOGGER: {"handlers": ["app"], "level": level, "propagate": False},
    }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "access": {
                "()": "uvicorn.logging.AccessFormatter",
                "fmt": '%(levelprefix)s %(asctime)s :: "%(request_line)s" %(status_code)s',
            },
            "app": {
                "format": "%(levelname)-8s %(asctime)s [%(name)s] %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "access": _stream_handler("access"),
            "app": _stream_handler("app"),
        },
        "loggers": loggers,
    }
