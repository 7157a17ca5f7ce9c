# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable, stateless helpers:
# - utils.py: message formatting, email check, debounce, capitalization
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.utils import (
    capitalize_first_letter,
    debounce,
    format_message,
    validate_email,
)

__all__ = [
    "capitalize_first_letter",
    "debounce",
    "format_message",
    "validate_email",
]
