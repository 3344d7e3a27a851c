"""
Environment-backed configuration for hashset.

Values are read from `os.environ` on every access so that changes made at
runtime (or by tests) are picked up immediately.
"""

from __future__ import annotations

import logging
import os
from typing import Literal

ENV_HASHSET_LOG_LEVEL = "HASHSET_LOG_LEVEL"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_LOG_LEVELS: tuple[LogLevel, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL: LogLevel = "WARNING"


def parse_log_level(raw: str) -> LogLevel | None:
	"""Normalize a level name like `debug`; `None` if it is not a known level."""
	name = raw.strip().upper()
	for level in _LOG_LEVELS:
		if name == level:
			return level
	return None


def level_number(level: LogLevel) -> int:
	return logging.getLevelNamesMapping()[level]


class Env:
	@property
	def log_level(self) -> LogLevel:
		return (
			parse_log_level(os.environ.get(ENV_HASHSET_LOG_LEVEL, ""))
			or DEFAULT_LOG_LEVEL
		)

	@log_level.setter
	def log_level(self, value: LogLevel) -> None:
		os.environ[ENV_HASHSET_LOG_LEVEL] = value

	@property
	def log_level_number(self) -> int:
		return level_number(self.log_level)


env = Env()
