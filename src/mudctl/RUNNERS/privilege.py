"""
Elevated-privilege execution for commands touching root-owned host paths.
"""
import os
from typing import List

ELEVATE_COMMAND = ["sudo", "--"]


def is_root() -> bool:
    """
    Checks whether this process already runs with an effective uid of 0.
    """
    return os.geteuid() == 0


def elevate(command: List[str]) -> List[str]:
    """
    Prefixes a command with sudo unless we are root already.

    :param command: Command and arguments.
    :return: The command to execute.
    """
    if is_root():
        return list(command)
    return ELEVATE_COMMAND + list(command)
