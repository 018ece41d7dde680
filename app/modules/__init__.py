# 📄 File: app/modules/__init__.py
# 🧭 Purpose (Layman Explanation):
# Holds the feature areas of the billing service, each in its own folder.
# 🧪 Purpose (Technical Summary):
# Namespace for bounded-context modules (domain / application / infrastructure / presentation).
