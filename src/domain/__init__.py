"""Domain layer - colors, color sequences and errors."""
from domain.color import Color
from domain.errors import EmptySequenceError, GradientError, OutOfRangeError
from domain.sequence import ColorSequence

__all__ = [
    'Color',
    'ColorSequence',
    'EmptySequenceError',
    'GradientError',
    'OutOfRangeError',
]
