from .config import settings, set_settings, reset_settings, setting, apply_log_level
from .log import get_logger
from .text import as_text, only_digits, to_title_case, first_letter_to_upper

__all__ = [
    "settings", "set_settings", "reset_settings", "setting", "apply_log_level",
    "get_logger",
    "as_text", "only_digits", "to_title_case", "first_letter_to_upper",
]
