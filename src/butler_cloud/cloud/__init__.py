from butler_cloud.cloud.client import AUTH_HEADER, CloudClient, RequestMethod
from butler_cloud.cloud.forms import FilePart, FormData
from butler_cloud.cloud.models import (
    EvaluatePromptParams,
    Feedback,
    LoginToken,
    ModelKind,
    Project,
    PromptEvaluation,
    PromptMessage,
    User,
)
from butler_cloud.cloud.responses import CloudError, HTTPRequestError, parse_response_json
from butler_cloud.cloud.urls import api_root, resolve_url

__all__ = [
    "AUTH_HEADER",
    "CloudClient",
    "CloudError",
    "EvaluatePromptParams",
    "Feedback",
    "FilePart",
    "FormData",
    "HTTPRequestError",
    "LoginToken",
    "ModelKind",
    "Project",
    "PromptEvaluation",
    "PromptMessage",
    "RequestMethod",
    "User",
    "api_root",
    "parse_response_json",
    "resolve_url",
]
