"""Deferred-result bookkeeping for the async (webhook) flow."""

from datetime import datetime
from enum import Enum
from typing import Optional

from .base import WireModel


class TaskStatus(str, Enum):
    """Status of a queued async task."""

    QUEUED = "Queued"
    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"


class AsyncRequestResponse(WireModel):
    """Immediate answer to a request submitted with ``async=true``."""

    task_id: str
    status: str
    results_uri: Optional[str] = None


class WebhookRequest(WireModel):
    """Notification posted to the caller's webhook when a task completes."""

    request_timestamp: Optional[datetime] = None
    request_uri: Optional[str] = None
    credentials_id: Optional[str] = None
    task_id: str
    status: str
    results_uri: Optional[str] = None
    error: Optional[str] = None
    error_description: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.status == TaskStatus.FAILED
