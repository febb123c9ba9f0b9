from rest_framework import viewsets
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from apps.core.patterns import UUID_PATTERN
from .serializers import PubSerializer
from .services import get_all_pubs, get_pub_by_id


class PubViewSet(viewsets.ViewSet):
    """
    Read-only pub endpoints.

    list: Get all pubs, optionally sorted by rating
    retrieve: Get a specific pub
    """

    permission_classes = [AllowAny]
    lookup_value_regex = UUID_PATTERN

    @extend_schema(
        parameters=[
            OpenApiParameter(
                'sortBy', OpenApiTypes.STR,
                description="Sort by rating: 'asc' or 'desc'. Anything else keeps default order.",
            ),
        ],
        responses={200: PubSerializer(many=True)},
        tags=['pubs'],
    )
    def list(self, request):
        """List pubs using service layer."""
        sort_by = request.query_params.get('sortBy', request.query_params.get('sort_by'))
        pubs = get_all_pubs(sort_by=sort_by)
        return Response(PubSerializer(pubs, many=True).data)

    @extend_schema(responses={200: PubSerializer}, tags=['pubs'])
    def retrieve(self, request, pk=None):
        """Get a single pub using service layer."""
        pub = get_pub_by_id(pub_id=pk)
        return Response(PubSerializer(pub).data)
