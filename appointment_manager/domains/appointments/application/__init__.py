"""
Appointments Application Layer

Ports, DTOs and use cases for the appointments bounded context.
"""
