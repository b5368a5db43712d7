from .author import AuthorModel

__all__ = [
    "AuthorModel",
]
