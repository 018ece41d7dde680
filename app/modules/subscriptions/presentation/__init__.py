# 📄 File: app/modules/subscriptions/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web-facing side of the subscriptions module.
# 🧪 Purpose (Technical Summary):
# Presentation layer: FastAPI routers and dependency providers.
