# The module is to define the common models shared by the client, the registry and the server.
# Author: Shibo Li
# Date: 2025-06-11
# Version: 1.0.2


from enum import Enum
from pydantic import BaseModel, Field
from typing import Any, Dict, Literal, Optional

Method = Literal["GET", "POST"]


class ErrorCode(str, Enum):
    """The fixed set of error codes a tool invocation can report."""
    CONNECTION_ERROR = "CONNECTION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    RATE_LIMIT = "RATE_LIMIT"
    API_ERROR = "API_ERROR"
    UNKNOWN_TOOL = "UNKNOWN_TOOL"
    INVALID_ARGUMENTS = "INVALID_ARGUMENTS"


class ToolError(BaseModel):
    """
    Represents a normalized failure of a tool invocation.
    Attributes:
        error (str): Human-readable message.
        code (ErrorCode): One of the fixed error codes.
        status (Optional[int]): Upstream HTTP status, only for API_ERROR.
    """
    error: str = Field(..., description="Human-readable error message.")
    code: ErrorCode = Field(..., description="Normalized error code.")
    status: Optional[int] = Field(default=None, description="Upstream HTTP status, when relevant.")

    def to_envelope(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class OutboundRequest(BaseModel):
    """
    One HTTP request against the registry API, fully bound from a tool invocation.
    Attributes:
        method (Method): GET, or POST when a JSON body is sent.
        path (str): Path relative to the API origin, placeholders already substituted.
        params (Dict[str, str]): Query string parameters, already stringified.
        body (Optional[Any]): JSON body for POST requests.
    """
    model_config = {"frozen": True}

    method: Method = "GET"
    path: str
    params: Dict[str, str] = Field(default_factory=dict)
    body: Optional[Any] = None


# A result envelope is either the decoded upstream JSON or ToolError.to_envelope().
Envelope = Any
