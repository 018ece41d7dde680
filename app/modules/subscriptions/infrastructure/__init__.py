# 📄 File: app/modules/subscriptions/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# The parts of the subscriptions module that talk to the database.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer: SQLAlchemy table model and repository implementation.
