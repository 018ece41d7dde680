# 📄 File: app/modules/subscriptions/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the subscription web endpoints by API version.
# 🧪 Purpose (Technical Summary):
# API package initialization for the subscriptions module.
