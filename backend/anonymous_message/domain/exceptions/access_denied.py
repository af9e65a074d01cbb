"""
AccessDeniedError - No signed-in user, or the user may not touch the record.
Maps to: HTTP 401/403
"""

NOT_SIGNED_IN = "Sign in to continue."


class AccessDeniedError(Exception):
    def __init__(self, message: str = NOT_SIGNED_IN):
        super().__init__(message)
        self.message = message
