"""
Multilspy-style logger for the ACF PRO installer plugin.

Every record is emitted as a single JSON line so that package manager output
stays grep-able in CI logs.
"""

import inspect
import logging
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class LogLine(BaseModel):
    """
    Represents a line in the plugin log
    """

    time: str
    level: str
    caller_file: str
    caller_name: str
    caller_line: int
    message: str


class AcfInstallerLogger:
    """
    Logger class
    """

    def __init__(self, name: str = "acf_pro_installer", level: Optional[int] = None) -> None:
        self.logger = logging.getLogger(name)
        if level is not None:
            self.logger.setLevel(level)

    def log(self, debug_message: str, level: int, sanitized_error_message: str = "") -> None:
        """
        Log the debug and sanitized messages using the logger
        """

        debug_message = debug_message.replace("'", '"').replace("\n", " ")
        sanitized_error_message = sanitized_error_message.replace("'", '"').replace("\n", " ")

        # Collect details about the callee
        curframe = inspect.currentframe()
        calframe = inspect.getouterframes(curframe, 2)
        caller_file = calframe[1][1].split("/")[-1]
        caller_line = calframe[1][2]
        caller_name = calframe[1][3]

        message = debug_message
        if sanitized_error_message:
            message = f"{debug_message} ({sanitized_error_message})"

        self.logger.log(
            level=level,
            msg=LogLine(
                time=str(datetime.now()),
                level=logging.getLevelName(level),
                caller_file=caller_file,
                caller_name=caller_name,
                caller_line=caller_line,
                message=message,
            ).model_dump_json(),
        )
