from .marketing_copy import (
    generate_marketing_copy,
    MARKETING_ERROR_MESSAGE,
    MARKETING_EMPTY_MESSAGE,
    TONES,
)

__all__ = [
    "generate_marketing_copy",
    "MARKETING_ERROR_MESSAGE",
    "MARKETING_EMPTY_MESSAGE",
    "TONES",
]
