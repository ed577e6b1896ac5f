"""
API v1 Routes

One router per resource, mounted at the application root.
"""
