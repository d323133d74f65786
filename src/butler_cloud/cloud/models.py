from __future__ import annotations

from enum import Enum
from typing import Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict

MessageRole = Literal["system", "user", "assistant"]


class ModelKind(str, Enum):
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    OLLAMA = "ollama"


class CloudModel(BaseModel):
    """Server-owned record. Built from response JSON without validation."""

    model_config = ConfigDict(extra="allow", frozen=True)


class User(CloudModel):
    id: int = 0
    name: str | None = None
    given_name: str | None = None
    family_name: str | None = None
    email: str = ""
    picture: str = ""
    locale: str = ""
    created_at: str = ""
    updated_at: str = ""
    access_token: str = ""
    role: str | None = None
    supporter: bool = False
    github_access_token: str | None = None
    github_username: str | None = None


class Project(CloudModel):
    name: str = ""
    description: str | None = None
    repository_id: str = ""
    git_url: str = ""
    created_at: str = ""
    updated_at: str = ""


class Feedback(CloudModel):
    id: int = 0
    user_id: int = 0
    feedback: str = ""
    context: str = ""
    created_at: str = ""
    updated_at: str = ""


class LoginToken(CloudModel):
    token: str = ""
    expires: str = ""
    url: str = ""


class PromptEvaluation(CloudModel):
    message: str = ""


class PromptMessage(BaseModel):
    role: MessageRole
    content: str


class EvaluatePromptParams(BaseModel):
    messages: list[PromptMessage]
    temperature: float | None = None
    max_tokens: int | None = None
    model_kind: ModelKind | None = None


ModelT = TypeVar("ModelT", bound=CloudModel)


def build(model: type[ModelT], data: Any) -> ModelT | None:
    if data is None:
        return None
    return model.model_construct(**data)


def build_list(model: type[ModelT], data: Any) -> list[ModelT]:
    if not data:
        return []
    return [model.model_construct(**item) for item in data]


__all__ = [
    "CloudModel",
    "EvaluatePromptParams",
    "Feedback",
    "LoginToken",
    "MessageRole",
    "ModelKind",
    "Project",
    "PromptEvaluation",
    "PromptMessage",
    "User",
    "build",
    "build_list",
]
