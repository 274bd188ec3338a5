"""
Human-in-the-loop review module.

Provides:
- Review workflow management
- Decision application (NEW / PENDING_REVIEW -> APPROVED / REJECTED)
"""

from .workflow import ReviewDecision, ReviewWorkflow, approve_all

__all__ = [
    "ReviewWorkflow",
    "ReviewDecision",
    "approve_all",
]
