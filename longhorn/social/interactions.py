"""
Friend requests and chat messages for the Longhorn Network.

Each kind of task shares one process-wide lock, so friend sets and chat logs
are never updated by two tasks of the same kind at once.
"""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor, wait
from typing import List, Optional, TYPE_CHECKING

from ..config import CHAT_DELAY, FRIEND_REQUEST_DELAY, SOCIAL_DEMO_TIMEOUT, SOCIAL_DEMO_WORKERS
from ..errors import InvalidInputError, SocialTaskTimeout
from ..log import get_logger

if TYPE_CHECKING:
    from ..models.student import Student

logger = get_logger(__name__)

FRIEND_REQUEST_LOCK = threading.Lock()
CHAT_LOCK = threading.Lock()


def _cancelled(cancel_event: Optional[threading.Event], delay: float) -> bool:
    """Sleep up to `delay` seconds; True if the event fired first."""
    if cancel_event is None:
        if delay > 0:
            time.sleep(delay)
        return False
    return cancel_event.wait(timeout=max(0.0, delay))


def send_friend_request(
    sender: "Student",
    receiver: "Student",
    delay: float = FRIEND_REQUEST_DELAY,
    cancel_event: Optional[threading.Event] = None,
) -> bool:
    """
    Make sender and receiver friends of each other.
    Returns False if cancelled before the update was applied.
    """
    if sender is None or receiver is None:
        raise InvalidInputError("friend request needs both a sender and a receiver")

    with FRIEND_REQUEST_LOCK:
        if _cancelled(cancel_event, delay):
            logger.debug("Friend request %s -> %s cancelled", sender.name, receiver.name)
            return False
        sender.add_friend(receiver)
        receiver.add_friend(sender)
        logger.info("FriendRequest: %s and %s are now friends.", sender.name, receiver.name)
        return True


def send_chat_message(
    sender: "Student",
    receiver: "Student",
    message: str,
    delay: float = CHAT_DELAY,
    cancel_event: Optional[threading.Event] = None,
) -> bool:
    """
    Append "sender -> receiver: message" to both chat logs.
    Returns False if cancelled before the record was written.
    """
    if sender is None or receiver is None:
        raise InvalidInputError("chat message needs both a sender and a receiver")

    with CHAT_LOCK:
        if cancel_event is not None and cancel_event.is_set():
            return False
        record = f"{sender.name} -> {receiver.name}: {message}"
        sender.add_chat_message(record)
        receiver.add_chat_message(record)
        if _cancelled(cancel_event, delay):
            logger.debug("Chat %r interrupted after write", record)
            return True
        logger.info("Chat sent: %s", record)
        return True


def run_social_demo(
    a: "Student",
    b: "Student",
    timeout: float = SOCIAL_DEMO_TIMEOUT,
    friend_delay: float = FRIEND_REQUEST_DELAY,
    chat_delay: float = CHAT_DELAY,
) -> List[bool]:
    """
    Run two friend requests and two chats between a and b concurrently.
    Raises SocialTaskTimeout if they do not all finish within `timeout`.
    """
    cancel = threading.Event()
    executor = ThreadPoolExecutor(max_workers=SOCIAL_DEMO_WORKERS)
    try:
        futures = [
            executor.submit(send_friend_request, a, b, friend_delay, cancel),
            executor.submit(send_chat_message, a, b, "Hello there!", chat_delay, cancel),
            executor.submit(send_friend_request, b, a, friend_delay, cancel),
            executor.submit(send_chat_message, b, a, "Hi back!", chat_delay, cancel),
        ]
        done, not_done = wait(futures, timeout=timeout)
        if not_done:
            cancel.set()
            for f in not_done:
                f.cancel()
            raise SocialTaskTimeout(f"{len(not_done)} social task(s) did not finish in {timeout}s")
        return [f.result() for f in futures]
    finally:
        executor.shutdown(wait=True)
