# 📄 File: app/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a Python package containing common tools that every part
# of the billing service can use, like settings, logging and database connections.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package initialization for configuration, infrastructure,
# exceptions and logging used by the application modules.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - app.modules.subscriptions (all layers)
# - app.main and app.api

__all__ = []
