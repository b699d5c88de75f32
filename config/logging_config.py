"""日志配置"""
import logging.config

from config.settings import LOG_LEVEL


def build_logging_config(level: str = LOG_LEVEL) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "level": level,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": level,
        },
    }


def setup_logging(level: str = LOG_LEVEL) -> None:
    """初始化根日志（Streamlit 每次重跑都会调用，dictConfig 可重复执行）"""
    logging.config.dictConfig(build_logging_config(level.upper()))
