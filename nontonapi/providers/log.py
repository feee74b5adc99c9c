# -*- coding: utf-8 -*-
# NontonAPI
# Project by https://github.com/rix1337

import inspect
import os
import sys
from typing import Any

from dotenv import load_dotenv
from loguru import logger
from wcwidth import wcswidth

load_dotenv()

_log_handle = None


def add_sink(sink=sys.stdout) -> None:
    global _log_handle

    if _log_handle is not None:
        logger.remove(_log_handle)

    _log_handle = logger.add(
        sink,
        format="<d>{time:YYYY-MM-DDTHH:mm:ss}</d> <lvl>{level:<5}</lvl> {extra[context]}<b><M>{extra[source]}</M></b>{extra[padding]} {message}",
        colorize=True,
        level=5,
    )


logger.remove()
add_sink()
logger.level(name="WARN", no=30, color="<yellow>")
logger.level(name="CRIT", no=50, color="<red>")

log_level_names = {
    50: "CRIT",
    40: "ERROR",
    30: "WARN",
    20: "INFO",
    10: "DEBUG",
    5: "TRACE",
}

log_names_to_level = {v: k for k, v in log_level_names.items()}


def _read_env_log(key, default):
    level = os.getenv(key, default)

    try:
        try:
            level = log_names_to_level[level.upper()]
        except Exception:
            level = max(0, min(int(level), 50))
    except Exception:
        level = default

    return level


_log_level = _read_env_log("LOG", 20)


_context_replace = {
    "nontonapi": "",  # /nontonapi/*
    "api": "🌐",  # /nontonapi/api/*
    "anime": "🎬",  # /nontonapi/api/anime/*
    "health": "🩺",  # /nontonapi/api/health/*
    "downloads": "📥",  # /nontonapi/downloads/*
    "helpers": "",  # /nontonapi/downloads/helpers/*
    "token": "🔑",  # /nontonapi/downloads/helpers/token.py
    "manifest": "📜",  # /nontonapi/downloads/helpers/manifest.py
    "redirects": "↪️",  # /nontonapi/downloads/helpers/redirects.py
    "script_params": "🧾",  # /nontonapi/downloads/helpers/script_params.py
    "providers": "🔌",  # /nontonapi/providers/*
    "config": "⚙️",  # /nontonapi/providers/config.py
    "system_info": "🖥️",  # /nontonapi/providers/system_info.py
    "utils": "🧰",  # /nontonapi/providers/utils.py
    "scraper": "🔍",  # /nontonapi/scraper/*
}


def _contexts_to_str(contexts: list[str]) -> tuple[str, str]:
    if not contexts:
        return "", ""

    if contexts[0] == "nontonapi" and len(contexts) == 1:
        return "🌌", ""

    return "".join(_context_replace.get(c, c) for c in contexts), ""


def get_log_level(contexts: list[str] = []) -> int:
    level = _log_level

    for context in contexts:
        context_level = _read_env_log(
            "LOG" + f"_{context.upper()}" if context else "", _log_level
        )
        if context_level < level:
            level = context_level

    return level


class _Logger:
    def __init__(self, contexts: list[str] = []):
        self.level = get_log_level(contexts)
        context, source = _contexts_to_str(contexts)
        padding = max(0, 6 - wcswidth(context + source))

        self.logger_alt = logger.bind(
            context=context,
            source=source,
            padding=" " * padding,
        )
        self.logger = self.logger_alt.opt(colors=True)

    def _log(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.level > level:
            return
        try:
            try:
                self.logger.log(log_level_names[level], msg, *args, **kwargs)
            except ValueError as e:
                # URLs and HTML snippets can look like unbalanced color tags
                self.logger_alt.log(log_level_names[level], msg, *args, **kwargs)

                if self.level <= 10:
                    self.logger_alt.debug(
                        f"Log formatting error: {e} | Original message: {msg}"
                    )
        except Exception:
            print(f"LOGGING FAILURE: {msg}", file=sys.stderr)

    def crit(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(50, msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(40, msg, *args, **kwargs)

    def warn(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(30, msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(20, msg, *args, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(10, msg, *args, **kwargs)


_loggers = {}


def get_logger(context: str) -> _Logger:
    if context not in _loggers:
        _loggers[context] = _Logger(context.split(".") if context else [])
    return _loggers[context]


def _get_logger_for_module() -> _Logger:
    frame = inspect.currentframe()
    caller_frame = frame.f_back.f_back
    module_name = caller_frame.f_globals["__name__"]

    return get_logger(module_name)


def crit(msg: str) -> None:
    _get_logger_for_module().crit(msg)


def error(msg: str) -> None:
    _get_logger_for_module().error(msg)


def warn(msg: str) -> None:
    _get_logger_for_module().warn(msg)


def info(msg: str) -> None:
    _get_logger_for_module().info(msg)


def debug(msg: str) -> None:
    _get_logger_for_module().debug(msg)
