"""
Infrastructure layer package for the Subscription Billing service.
Provides database engine, session management and the declarative base.
"""
