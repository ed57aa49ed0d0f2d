"""
LinkHub Backend — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the two failure kinds a request can hit.
Why:   Services raise these; global handlers in main.py turn them into JSON
       responses, so no route carries its own try/except.
How:   Each exception carries a message and optional context dict.

Exception Hierarchy:
    LinkHubError (base)
    ├── NotFoundError   → 404 Not Found (single-entity lookup matched nothing)
    └── StorageError    → 500 Internal Server Error (driver raised)

Writes that match zero documents are NOT errors: the driver's zero-affected
acknowledgement is returned with HTTP 200.
"""

from typing import Any, Dict, Optional


class LinkHubError(Exception):
    """
    Base exception for all LinkHub application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(LinkHubError):
    """
    Raised when a single-entity lookup matches no document.

    When:    GET /users/{userId}, GET /users/{userId}/profile-views, GET /posts/{postId}.
    HTTP:    404 Not Found

    The driver returns None for a missing document (not an exception); the
    service layer converts that None into this exception.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource[:1].upper()}{resource[1:]} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class StorageError(LinkHubError):
    """
    Raised when a MongoDB operation fails.

    HTTP:    500 Internal Server Error

    The message is built from the action and resource being handled
    ("Error fetching users", "Error liking post"), so every endpoint gets a
    distinct message from one policy. The driver's own error text is kept in
    `reason` and only returned to the client when the caller opted in.
    """

    def __init__(
        self,
        action: str,
        resource: str,
        reason: Optional[str] = None,
        expose_reason: bool = False,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["action"] = action
        ctx["resource"] = resource
        if reason:
            ctx["reason"] = reason
        super().__init__(message=f"Error {action} {resource}", context=ctx)
        self.action = action
        self.resource = resource
        self.reason = reason
        self.expose_reason = expose_reason

    @property
    def public_details(self) -> Optional[Dict[str, Any]]:
        """Details safe to put in the response body, or None."""
        if self.expose_reason and self.reason:
            return {"reason": self.reason}
        return None
