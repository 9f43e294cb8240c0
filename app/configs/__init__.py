from app.configs.settings import (
    MALFORMATTED_ID,
    ONLY_CREATOR_MAY_DELETE,
    ONLY_CREATOR_MAY_UPDATE,
    TOKEN_MISSING_OR_INVALID,
    Settings,
    file_logger,
    settings,
)

__all__ = [
    "MALFORMATTED_ID",
    "ONLY_CREATOR_MAY_DELETE",
    "ONLY_CREATOR_MAY_UPDATE",
    "TOKEN_MISSING_OR_INVALID",
    "Settings",
    "file_logger",
    "settings",
]
