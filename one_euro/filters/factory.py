"""
Filter factory.

Maps the kind names used in config files and on the command line to
filter classes.
"""

import logging
from typing import Optional

from one_euro.filters.basic import (
    OneEuroFilter,
    OneEuroFilter2,
    OneEuroFilter3,
    OneEuroFilterDirection,
    OneEuroFilterQuaternion,
)
from one_euro.filters.composite import PoseFilter, RayFilter
from one_euro.shared.types import FilterParams

logger = logging.getLogger(__name__)

FILTER_KINDS = {
    "scalar": OneEuroFilter,
    "vector2": OneEuroFilter2,
    "vector3": OneEuroFilter3,
    "rotation": OneEuroFilterQuaternion,
    "direction": OneEuroFilterDirection,
    "pose": PoseFilter,
    "ray": RayFilter,
}


def create_filter(kind: str, params: Optional[FilterParams] = None):
    """
    Create a filter by kind name.

    Args:
        kind: One of FILTER_KINDS
        params: Initial parameters. Defaults to FilterParams()

    Raises:
        ValueError: If kind is unknown
    """
    try:
        filter_class = FILTER_KINDS[kind]
    except KeyError:
        raise ValueError(
            f"Unknown filter kind '{kind}'. Expected one of: {', '.join(FILTER_KINDS)}"
        ) from None

    params = params or FilterParams()
    logger.debug(f"Creating {filter_class.__name__} with {params}")
    return filter_class(params.beta, params.min_cutoff)
