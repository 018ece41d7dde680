# 📄 File: app/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings that tell the billing service how to connect to its database
# and how to behave in each environment.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization with exports for settings management.
#
# 🔗 Dependencies:
# - settings.py (application settings)
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - Infrastructure components

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
