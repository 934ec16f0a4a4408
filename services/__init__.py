"""
Application services layer.

Services orchestrate maintenance operations using repositories.
"""

from services.budget_service import BudgetChange, BudgetService, BudgetSkip, MigrationSummary
from services.cleanup_service import CleanupService, CleanupSummary

# Result type for consistent error handling
from services.result import Result

# Service interfaces (ABCs)
from services.interfaces import IBudgetService, ICleanupService

__all__ = [
    # Concrete services
    "CleanupService",
    "BudgetService",
    # Outcomes
    "CleanupSummary",
    "MigrationSummary",
    "BudgetChange",
    "BudgetSkip",
    # Result type
    "Result",
    # Interfaces
    "ICleanupService",
    "IBudgetService",
]
