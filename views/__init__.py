"""
User Interface components and views for SPD Lab.

This package contains the Streamlit UI components:

UI Utilities (ui_utils):
- Logging configuration
- Error handling and user messaging
- Safe operation wrappers

Sidebar Components (sidebar):
- Spectrum upload
- Area and power unit selection

Main Content (main_content):
- Import problem table
- Calculation and spectrum tables
- Spectrum and weighting function charts
- CSV download buttons
"""

# ============== Utilities =================
from views.ui_utils import (
    # Error handling
    show_error_message,
    show_warning_message,
    show_info_message,
    handle_error,
    try_operation,
    describe_error
)
