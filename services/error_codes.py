"""
Standard error codes for the service layer.

Scripts map these to exit codes and messages without parsing error text.

Usage:
    from services import error_codes
    from services.result import Result

    if amount <= 0:
        return Result.fail("Amount must be positive", code=error_codes.VALIDATION_ERROR)
"""

# General errors
VALIDATION_ERROR = "validation_error"

# Manager errors
MANAGER_NOT_FOUND = "manager_not_found"

# Store errors
WRITE_FAILED = "write_failed"
