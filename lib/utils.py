# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Small stateless helpers used across the application:
# - format_message: timestamp-prefixed log/message lines
# - validate_email: loose address shape check
# - debounce: trailing-edge call coalescing
# - capitalize_first_letter: display-name formatting
# =============================================================================

import re
import threading
from datetime import datetime, timezone
from typing import Any, Callable


# =============================================================================
# Text Utilities
# =============================================================================

def format_message(message: str) -> str:
    """
    Prefix a message with the current UTC time in brackets.

    Example:
        format_message("hello")  # "[2024-01-01T00:00:00.000Z] hello"
    """
    now = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return f"[{now.replace('+00:00', 'Z')}] {message}"


def capitalize_first_letter(text: str) -> str:
    """
    Upper-case the first character and leave the rest unchanged.

    Example:
        capitalize_first_letter("hello world")  # "Hello world"
        capitalize_first_letter("")             # ""
    """
    return text[:1].upper() + text[1:]


# =============================================================================
# Validation
# =============================================================================

# Shape check only (something@something.something), not RFC 5322
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def validate_email(email: str) -> bool:
    """
    Check that a string looks like an email address.

    Example:
        validate_email("a@b.co")        # True
        validate_email("not-an-email")  # False
    """
    return EMAIL_PATTERN.fullmatch(email) is not None


# =============================================================================
# Call Scheduling
# =============================================================================

def debounce(func: Callable[..., Any], wait_ms: float) -> Callable[..., None]:
    """
    Return a trailing-edge debounced wrapper around func.

    Every call cancels the pending one and schedules func to run wait_ms
    milliseconds later with the latest arguments. Only the last call of a
    burst runs. func runs on a timer thread and its result is discarded.

    Each wrapper owns a single pending-timer slot; concurrent callers of the
    same wrapper race for it and the last one wins.

    Example:
        save = debounce(write_draft, 300)
        save("a"); save("ab"); save("abc")  # write_draft("abc") once, ~300ms later
    """
    lock = threading.Lock()
    pending: threading.Timer | None = None

    def debounced(*args: Any, **kwargs: Any) -> None:
        nonlocal pending
        with lock:
            if pending is not None:
                pending.cancel()
            pending = threading.Timer(wait_ms / 1000, func, args=args, kwargs=kwargs)
            pending.daemon = True
            pending.start()

    return debounced
