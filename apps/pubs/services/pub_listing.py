"""Read-only pub queries."""

from typing import Optional
from uuid import UUID

from ..models import Pub
from .exceptions import PubNotFoundError

SORT_ASC = 'asc'
SORT_DESC = 'desc'


def get_all_pubs(*, sort_by: Optional[str] = None) -> list[Pub]:
    """
    List all pubs, optionally ordered by rating.

    Args:
        sort_by: 'asc' or 'desc' (case-insensitive). Anything else,
            including None and '', keeps the default store order.

    Returns:
        List of Pub instances
    """
    mode = (sort_by or '').lower()

    if mode == SORT_ASC:
        queryset = Pub.objects.order_by('rating', 'created_at')
    elif mode == SORT_DESC:
        queryset = Pub.objects.order_by('-rating', 'created_at')
    else:
        queryset = Pub.objects.all()

    return list(queryset)


def get_pub_by_id(*, pub_id: UUID) -> Pub:
    """
    Retrieve a pub by ID.

    Raises:
        PubNotFoundError: If pub doesn't exist
    """
    try:
        return Pub.objects.get(id=pub_id)
    except Pub.DoesNotExist:
        raise PubNotFoundError(f"Pub not found with id: {pub_id}")
