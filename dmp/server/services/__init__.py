"""
Request-scoped services for the DMP server: authentication, access guards
and user notifications.
"""
