# 📄 File: app/modules/subscriptions/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# The use cases of the subscriptions module: validating what callers send and
# coordinating reads and writes.
# 🧪 Purpose (Technical Summary):
# Application layer: request/response mappers, DTOs and CQRS-style command/query handlers.
