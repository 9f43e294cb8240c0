from app.services.auth import AuthService
from app.services.blog import BlogService
from app.services.user import UserService

__all__ = ["AuthService", "BlogService", "UserService"]
