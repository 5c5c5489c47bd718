from .user_roles import UserRolesTable

__all__ = ["UserRolesTable"]
