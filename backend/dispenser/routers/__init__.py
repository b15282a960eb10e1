"""
API routers for the dispenser backend.
"""
