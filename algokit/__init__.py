"""Solutions to classic algorithm exercises on numbers, text, arrays, linked lists and trees."""

__version__ = "0.1.0"
__all__ = ["arrays", "dynamic", "linked", "numbers", "structures", "text", "trees"]