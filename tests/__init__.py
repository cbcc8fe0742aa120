# tests/__init__.py
"""
Expose common test utilities so tests can import directly:
    from tests import make_loan, make_prepayment, make_rate_change
"""

from .utils import make_loan, make_prepayment, make_rate_change

__all__ = ["make_loan", "make_prepayment", "make_rate_change"]
