"""
Appointments Infrastructure Layer

SQLAlchemy persistence for the appointments bounded context.
"""
