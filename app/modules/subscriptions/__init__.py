# 📄 File: app/modules/subscriptions/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes everything about subscription billing records: the rules for a valid record,
# how records are stored, and the web endpoints that expose them.
# 🧪 Purpose (Technical Summary):
# Package initialization for the subscriptions module, laid out in domain-driven layers
# with a command/query split in the application layer.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, pydantic, app.shared
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.shared.infrastructure.database (metadata registration)

"""
Subscriptions Module

Architecture follows Domain-Driven Design:
- Domain: Subscription entity, billing-period codec, repository interface
- Application: Request/response mapping, command and query handlers, DTOs
- Infrastructure: SQLAlchemy model and repository implementation
- Presentation: FastAPI endpoints and dependency wiring
"""

__version__ = "1.0.0"
