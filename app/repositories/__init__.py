from app.repositories.users import UserRepository

__all__ = ["UserRepository"]
