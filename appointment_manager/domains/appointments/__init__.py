"""
Appointments Domain

Bounded context for scheduling medical appointments and tracking their
lifecycle from scheduling to completion, cancellation or no-show.
"""
