"""
Tuning Limits

The filter accepts any beta / min_cutoff. These checks only warn when a
value leaves the range the parameters are normally tuned in, so a typo
in a config file shows up in the log instead of as a frozen or jittery
signal.

Usage:
    from one_euro.utils.limits import check_params

    if not check_params(beta, min_cutoff):
        ...  # already logged
"""

import logging

from one_euro.shared.types import FilterParams

logger = logging.getLogger(__name__)


def check_params(beta: float, min_cutoff: float) -> bool:
    """
    Log a warning for each parameter outside its tuning range.

    Returns:
        True if both parameters are inside their ranges
    """
    ok = True

    lo, hi = FilterParams.BETA_RANGE
    if not lo <= beta <= hi:
        logger.warning(f"beta={beta} is outside the usual range [{lo}, {hi}]")
        ok = False

    lo, hi = FilterParams.MIN_CUTOFF_RANGE
    if not lo <= min_cutoff <= hi:
        logger.warning(f"min_cutoff={min_cutoff} is outside the usual range [{lo}, {hi}]")
        ok = False

    if min_cutoff <= 0.0:
        # Zero speed gives a zero cutoff and alpha 0
        logger.warning(f"min_cutoff={min_cutoff} is not positive; output will stay frozen at rest")
        ok = False

    return ok
