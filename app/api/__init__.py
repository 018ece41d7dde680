# 📄 File: app/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Marks the api folder as a Python package so the app can load its web routes and the helpers
# that wrap every request.
# 🧪 Purpose (Technical Summary):
# Package initialization for the API layer (versioned routers and middleware).
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# app.main.py

"""
Subscription Billing API Package

Structure:
    api/
    ├── __init__.py          # This file
    ├── middleware/          # API middleware components
    │   ├── logging.py
    │   └── error_handling.py
    └── v1/                  # API version 1
        ├── __init__.py
        ├── router.py        # Main v1 router
        └── health.py        # Health check endpoints
"""

__version__ = "1.0.0"
__description__ = "Subscription Billing REST API"
