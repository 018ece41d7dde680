# 📄 File: app/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this 'app' folder contains the Subscription Billing service code
# and records its version.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version and package metadata.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)

"""
Subscription Billing API

HTTP/JSON service managing subscription billing records and monthly
revenue summaries, backed by PostgreSQL.
"""

__version__ = "1.0.0"
__title__ = "Subscription Billing API"
__description__ = "Subscription billing records and monthly revenue summaries"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
]
