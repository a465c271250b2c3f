from ziva_admin.schemas.category import (
    CategoryDraft,
    CategoryNode,
    CategoryStats,
    CategoryTreeResponse,
    MutationResponse,
    NodeIdentity,
    SubtitleCreate,
)
from ziva_admin.schemas.session import LoginRequest, SessionInfo, Token

__all__ = [
    "CategoryDraft",
    "CategoryNode",
    "CategoryStats",
    "CategoryTreeResponse",
    "MutationResponse",
    "NodeIdentity",
    "SubtitleCreate",
    "LoginRequest",
    "SessionInfo",
    "Token",
]
