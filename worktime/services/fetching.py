# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Guarded data fetching for read-side aggregations."""

import logging
from collections.abc import Callable
from typing import TypeVar

from sqlalchemy.exc import SQLAlchemyError

from worktime.core.errors import AggregationInputMissing

logger = logging.getLogger(__name__)

T = TypeVar("T")


def fetch(source: str, loader: Callable[[], T]) -> T:
    """Run a storage read, translating storage failures.

    Args:
        source: Name of the collection being fetched, for diagnostics.
        loader: Zero-argument callable performing the read.

    Returns:
        Whatever the loader returns.

    Raises:
        AggregationInputMissing: If the storage layer fails.
    """
    try:
        return loader()
    except SQLAlchemyError as e:
        logger.warning(f"Failed to fetch {source}: {e}")
        raise AggregationInputMissing(source) from e
