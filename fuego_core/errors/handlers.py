# =============================================================================
# fuego_core/errors/handlers.py
# Error Handling Utilities for Fuego Prime
# =============================================================================

from __future__ import annotations
import traceback
from typing import Optional, Callable, TypeVar

import streamlit as st

from fuego_core.logging import get_logger
from .exceptions import FuegoError

logger = get_logger(__name__)

T = TypeVar("T")

GENERIC_USER_MESSAGE = "Erro ao conectar com o servidor. Tente novamente."


def handle_error(
    error: Exception,
    show_user_message: bool = True,
    log_error: bool = True,
    user_message: Optional[str] = None,
) -> None:
    """
    Centralized error handling function.

    Backend text is only logged; the user sees ``user_message`` or a
    generic message.

    Args:
        error: The exception to handle
        show_user_message: Whether to display a toast to the user
        log_error: Whether to log the error
        user_message: Custom message to show user
    """
    if isinstance(error, FuegoError):
        code = error.code
        details = error.details
        recoverable = error.recoverable
        log_message = error.message
    else:
        code = "UNKNOWN"
        details = {"traceback": traceback.format_exc()}
        recoverable = True
        log_message = str(error)

    if log_error:
        logger.error(f"[{code}] {log_message}", extra={"details": details})

    if show_user_message:
        message = user_message or GENERIC_USER_MESSAGE
        if recoverable:
            st.toast(message, icon="⚠️")
        else:
            st.error(f"{message} Contate o suporte.")


def safe_execute(
    func: Callable[..., T],
    *args,
    default: Optional[T] = None,
    error_message: Optional[str] = None,
    **kwargs,
) -> Optional[T]:
    """
    Execute a function with automatic error handling.

    Usage:
        text = safe_execute(
            generate_marketing_copy,
            dish.name, dish.description, "formal",
            default="",
            error_message="Falha ao gerar o texto",
        )
    """
    try:
        return func(*args, **kwargs)
    except Exception as e:
        handle_error(e, user_message=error_message)
        return default
