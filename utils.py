"""
Utility functions for lazy views

Logging setup and helpers for inspecting view pipelines.
"""

import sys
import logging
from typing import Any, List, Optional

from models import ViewOptions, get_default_options
from views import BaseView


# Configure structured logging
def setup_logging(options: Optional[ViewOptions] = None) -> logging.Logger:
    """Setup logging for the lazy_views loggers at the configured level"""
    options = options or get_default_options()
    logging.basicConfig(
        level=options.numeric_log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    logger = logging.getLogger('lazy_views')
    logger.setLevel(options.numeric_log_level())
    return logger


def is_live_view(obj: Any) -> bool:
    """Check that obj is a view rather than a materialized collection"""
    return isinstance(obj, BaseView)


def describe_view(view: BaseView) -> List[str]:
    """Pipeline stages from the backing sequence outwards, e.g. ['source', 'filter', 'map']"""
    if not is_live_view(view):
        raise TypeError(f"Expected a view, got {type(view).__name__}")

    stages = []
    current = view
    while current is not None:
        stages.append(current.kind)
        current = getattr(current, 'source', None)
    stages.reverse()
    return stages
