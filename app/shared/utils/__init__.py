# 📄 File: app/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# Helpful tools that other parts of the app use for common tasks like logging.

# 🧪 Purpose (Technical Summary):
# Initializes the utilities package and re-exports the structured logging helpers.

# 🔗 Dependencies:
# - logging: Structured logging utilities

# 🔄 Connected Modules / Calls From:
# Used by: app.main, middleware

from .logging import setup_logging, log_context, request_id_var

__all__ = [
    "setup_logging",
    "log_context",
    "request_id_var",
]
