"""Domain exceptions for the FlowFill application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Callers
(scripts, future presentation layers) map them to user-facing output
through message, error_code, and details.
"""

from typing import Any


class FlowFillException(Exception):
    """Base exception for all FlowFill application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation (error, message, details)."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(FlowFillException):
    """Raised when input validation fails (e.g. duplicate keys in an aggregate)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(FlowFillException):
    """Raised when a requested resource is not found."""

    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        reason: str | None = None,
    ) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'flow', 'template').
            resource_id: The ID that was not found.
            reason: Optional detail (e.g. 'multiple rows matched').
        """
        details: dict[str, Any] = {
            "resource_type": resource_type,
            "resource_id": resource_id,
        }
        if reason:
            details["reason"] = reason
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            details,
        )


class FlowNotFoundException(ResourceNotFoundException):
    """Raised when a flow (instance or template) lookup does not match exactly one row."""

    def __init__(
        self,
        flow_id: str,
        *,
        template: bool = False,
        reason: str | None = None,
    ) -> None:
        """Initialize with the flow id and which set was searched.

        Args:
            flow_id: The flow id that was looked up.
            template: True when the lookup was over templates, False for instances.
            reason: Optional detail; set when more than one row matched.
        """
        super().__init__("template" if template else "flow", flow_id, reason)


class InvalidTemplateException(FlowFillException):
    """Raised when instantiation is requested on a flow that is not a template."""

    def __init__(self, flow_id: str) -> None:
        """Initialize with the offending flow id.

        Args:
            flow_id: Id of the flow that is not flagged as a template.
        """
        super().__init__(
            f"Flow is not a template: {flow_id}",
            "INVALID_TEMPLATE",
            {"flow_id": flow_id},
        )


class AssetProvisioningException(FlowFillException):
    """Raised when template assets could not be copied into a new flow's namespace."""

    def __init__(self, source_flow_id: str, target_flow_id: str, reason: str) -> None:
        """Initialize with source/target flow ids and the failure reason.

        Args:
            source_flow_id: Template whose assets were being copied.
            target_flow_id: New flow that should have received them.
            reason: Human-readable cause (e.g. the underlying OS error).
        """
        super().__init__(
            f"Failed to provision assets from {source_flow_id} to {target_flow_id}",
            "ASSET_PROVISIONING_ERROR",
            {
                "source_flow_id": source_flow_id,
                "target_flow_id": target_flow_id,
                "reason": reason,
            },
        )
