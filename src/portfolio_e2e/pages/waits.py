"""
Wait Helpers

Polling and condition-waiting utilities used instead of fixed sleeps.
Inspired by Cypress recurse pattern.
"""

from __future__ import annotations

import time
from typing import Callable, TypeVar

T = TypeVar("T")


def wait_for_condition(
    action: Callable[[], T],
    condition: Callable[[T], bool],
    timeout_seconds: float = 10.0,
    poll_interval_seconds: float = 0.5,
    error_message: str = "Condition not met within timeout",
) -> T:
    """
    Poll an action until condition is met.

    The action always runs at least once, even with a zero timeout.

    Args:
        action: Function to call repeatedly
        condition: Function that returns True when condition is met
        timeout_seconds: Maximum time to wait
        poll_interval_seconds: Time between polls
        error_message: Message for timeout error

    Returns:
        The result of action() when condition is met

    Raises:
        TimeoutError: If condition not met within timeout

    Example:
        # Wait until the login redirect has happened
        url = wait_for_condition(
            action=lambda: page.url,
            condition=lambda u: "/login" not in u,
            timeout_seconds=5.0,
        )
    """
    deadline = time.monotonic() + timeout_seconds

    while True:
        last_result = action()

        if condition(last_result):
            return last_result

        if time.monotonic() >= deadline:
            break

        time.sleep(poll_interval_seconds)

    raise TimeoutError(f"{error_message}. Last result: {last_result}")


def poll_until(
    predicate: Callable[[], bool],
    timeout_seconds: float,
    poll_interval_seconds: float,
) -> bool:
    """Boolean view of wait_for_condition: True if predicate held in time."""
    try:
        wait_for_condition(
            action=predicate,
            condition=bool,
            timeout_seconds=timeout_seconds,
            poll_interval_seconds=poll_interval_seconds,
        )
    except TimeoutError:
        return False
    return True
