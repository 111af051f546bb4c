"""Start-up self-checks of the finance engine against closed-form formulas"""

from .suite import SELF_CHECKS, nearly_equal, run_self_tests

__all__ = ["SELF_CHECKS", "nearly_equal", "run_self_tests"]
