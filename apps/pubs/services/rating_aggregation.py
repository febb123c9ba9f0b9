"""Rating aggregation service: keeps Pub.rating equal to the mean of its review rates."""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable
from uuid import UUID

from django.db import transaction
from django.db.models import Count, Sum

from ..models import Pub
from .exceptions import PubNotFoundError

logger = logging.getLogger(__name__)

RATING_PRECISION = Decimal('0.1')


def rating_from_totals(total: int, count: int) -> Decimal:
    """
    Mean from a rate sum and a review count, one decimal, ties rounding up.

    Division happens in Decimal so that e.g. (5 + 4) / 2 lands exactly on
    4.5 instead of a binary float approximation.

    Returns:
        Decimal('0') when count is zero, otherwise the rounded mean
    """
    if not count:
        return Decimal('0')

    mean = Decimal(total) / Decimal(count)
    return mean.quantize(RATING_PRECISION, rounding=ROUND_HALF_UP)


def calculate_rating(rates: Iterable[int]) -> Decimal:
    """Rounded mean of an iterable of integer rates."""
    rates = list(rates)
    return rating_from_totals(sum(rates), len(rates))


@transaction.atomic
def update_pub_rating(*, pub_id: UUID) -> Pub:
    """
    Recalculate and persist a pub's aggregate rating.

    Must run inside the transaction of the review mutation that
    triggered it. The pub row is locked for the read-recompute-write so
    concurrent review writes on the same pub serialize here.

    Args:
        pub_id: Pub UUID

    Returns:
        Updated Pub instance

    Raises:
        PubNotFoundError: If pub doesn't exist; aborts the enclosing transaction
    """
    try:
        pub = (
            Pub.objects
            .select_for_update()
            .get(id=pub_id)
        )
    except Pub.DoesNotExist:
        raise PubNotFoundError(f"Pub {pub_id} not found")

    totals = pub.reviews.aggregate(
        total=Sum('rate'),
        count=Count('id'),
    )
    pub.rating = rating_from_totals(totals['total'] or 0, totals['count'])

    # Saved even when unchanged
    pub.save(update_fields=['rating', 'updated_at'])
    logger.debug("Recomputed rating for pub %s: %s", pub_id, pub.rating)

    return pub
