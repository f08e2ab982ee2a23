"""
UI utilities for SPD Lab.

This module provides the shared UI plumbing:
- Logging configuration for the Streamlit process
- Error handling and messaging utilities
- Safe operation execution
- Display helpers for import problems
"""
# Standard library imports
import logging
from typing import Callable, List, Optional, TypeVar

# Third-party imports
import pandas as pd
import streamlit as st

# Local imports
from models.constants import ERROR_TABLE_COLUMNS, UI_ERROR_TITLES
from models.errors import CalculationError

# Configure logging for error tracking
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

T = TypeVar('T')

# ============================================================================
# ERROR HANDLING AND MESSAGING
# ============================================================================

def show_error_message(message: str, stop_execution: bool = False) -> None:
    """Display an error message with consistent styling."""
    logger.error(f"Error displayed to user: {message}")
    st.error(message)
    if stop_execution:
        st.stop()


def show_warning_message(message: str) -> None:
    """Display a warning message with consistent styling."""
    st.warning(message)


def show_info_message(message: str) -> None:
    """Display an info message with consistent styling."""
    st.info(message)


def handle_error(message: str, severity: str = "error", stop_execution: bool = False) -> None:
    """Display an error message with consistent styling based on severity."""
    if severity == "error":
        show_error_message(message, stop_execution)
    elif severity == "warning":
        logger.warning(f"Warning displayed to user: {message}")
        show_warning_message(message)
    else:
        logger.info(f"Info displayed to user: {message}")
        show_info_message(message)


def describe_error(error: Exception) -> str:
    """
    Turn an exception into a one-line message for the user.

    Calculation errors get a headline chosen by their ``kind``; anything else
    is shown with its exception type.
    """
    if isinstance(error, CalculationError):
        title = UI_ERROR_TITLES.get(error.kind, UI_ERROR_TITLES['calculation'])
        return f"{title}: {error.message}"
    return f"{type(error).__name__}: {error}"


def try_operation(
    operation: Callable[[], T],
    error_message: str,
    default_value: Optional[T] = None,
    severity: str = "error",
    stop_on_error: bool = False
) -> T:
    """Try to execute an operation and handle errors gracefully."""
    try:
        return operation()
    except CalculationError as e:
        logger.error(f"{error_message} ({e.kind}): {e.message}")
        handle_error(describe_error(e), severity, stop_on_error)
        return default_value
    except Exception as e:
        logger.exception(f"Operation failed: {error_message}")
        handle_error(f"{error_message}: {str(e)}", severity, stop_on_error)
        return default_value


# ============================================================================
# DATA DISPLAY UTILITIES
# ============================================================================

def row_errors_frame(errors: List) -> pd.DataFrame:
    """
    Build a table of import problems.

    Args:
        errors: RowError entries (row number, message)

    Returns:
        DataFrame with one line per rejected row
    """
    return pd.DataFrame(
        [(error.row, error.message) for error in errors],
        columns=list(ERROR_TABLE_COLUMNS)
    )
