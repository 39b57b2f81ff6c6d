"""
Notifications Module.

Notification-delivery port and an in-memory notification center.
"""

from .center import (
    NotificationCenter,
    NotificationDelivery,
    NotificationEvent,
    NotificationEventType,
)

__all__ = [
    "NotificationCenter",
    "NotificationDelivery",
    "NotificationEvent",
    "NotificationEventType",
]
