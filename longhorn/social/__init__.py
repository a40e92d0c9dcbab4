"""
Concurrent social interactions for the Longhorn Network.
"""

from .interactions import (
    FRIEND_REQUEST_LOCK,
    CHAT_LOCK,
    send_friend_request,
    send_chat_message,
    run_social_demo,
)

__all__ = [
    "FRIEND_REQUEST_LOCK",
    "CHAT_LOCK",
    "send_friend_request",
    "send_chat_message",
    "run_social_demo",
]
