"""Argument checks shared by the matrix and mixing modules."""


def check_text(name: str, value) -> None:
    """Raise TypeError unless `value` is a str."""
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
