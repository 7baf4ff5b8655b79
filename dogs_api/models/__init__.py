from .dog import Dog

__all__ = [
    "Dog",
]
