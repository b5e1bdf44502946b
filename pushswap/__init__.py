"""Sort integers with two stacks and push, swap and rotate operations."""

__version__ = "1.0.0"
__all__ = ["cli", "parsing", "sorting", "stacks"]