from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from apps.core.patterns import UUID_PATTERN
from .serializers import (
    ReviewSerializer,
    ReviewCreateSerializer,
    ReviewUpdateSerializer,
)
from .services import (
    create_review,
    get_review_by_id,
    get_all_reviews,
    get_pub_reviews,
    get_user_reviews,
    update_review,
    delete_review,
    like_review,
    unlike_review,
)


def get_viewer_id(request):
    """Requesting user's id, or None for anonymous access."""
    user = request.user
    if user is not None and user.is_authenticated:
        return user.id
    return None


class ReviewViewSet(viewsets.ViewSet):
    """
    ViewSet for Review operations.

    list: Get all reviews
    create: Create a review for a pub
    retrieve: Get a specific review
    update: Replace content and rate (author only)
    destroy: Delete a review (author only)
    by_pub: Reviews of one pub
    by_user: Reviews written by one user
    like / unlike: Add or remove the current user's like

    Read endpoints accept anonymous requests; the like flag is then
    always false.
    """

    permission_classes = [IsAuthenticatedOrReadOnly]
    lookup_value_regex = UUID_PATTERN

    @extend_schema(responses={200: ReviewSerializer(many=True)}, tags=['reviews'])
    def list(self, request):
        """Get all reviews using service layer."""
        reviews = get_all_reviews(viewer_id=get_viewer_id(request))
        return Response(ReviewSerializer(reviews, many=True).data)

    @extend_schema(
        request=ReviewCreateSerializer,
        responses={201: ReviewSerializer},
        tags=['reviews'],
    )
    def create(self, request):
        """Create review using service layer."""
        serializer = ReviewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        review = create_review(
            author_id=request.user.id,
            pub_id=serializer.validated_data['pub_id'],
            content=serializer.validated_data['content'],
            rate=serializer.validated_data['rate'],
        )

        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: ReviewSerializer}, tags=['reviews'])
    def retrieve(self, request, pk=None):
        """Get a single review using service layer."""
        review = get_review_by_id(review_id=pk, viewer_id=get_viewer_id(request))
        return Response(ReviewSerializer(review).data)

    @extend_schema(
        request=ReviewUpdateSerializer,
        responses={200: ReviewSerializer},
        tags=['reviews'],
    )
    def update(self, request, pk=None):
        """Update review using service layer."""
        serializer = ReviewUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        review = update_review(
            review_id=pk,
            user_id=request.user.id,
            content=serializer.validated_data['content'],
            rate=serializer.validated_data['rate'],
        )

        return Response(ReviewSerializer(review).data)

    @extend_schema(responses={204: None}, tags=['reviews'])
    def destroy(self, request, pk=None):
        """Delete review using service layer."""
        delete_review(review_id=pk, user_id=request.user.id)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={200: ReviewSerializer(many=True)}, tags=['reviews'])
    @action(detail=False, methods=['get'], url_path=rf'pub/(?P<pub_id>{UUID_PATTERN})', url_name='by-pub')
    def by_pub(self, request, pub_id=None):
        """Get reviews of a pub using service layer."""
        reviews = get_pub_reviews(pub_id=pub_id, viewer_id=get_viewer_id(request))
        return Response(ReviewSerializer(reviews, many=True).data)

    @extend_schema(responses={200: ReviewSerializer(many=True)}, tags=['reviews'])
    @action(detail=False, methods=['get'], url_path=rf'user/(?P<user_id>{UUID_PATTERN})', url_name='by-user')
    def by_user(self, request, user_id=None):
        """Get reviews written by a user using service layer."""
        reviews = get_user_reviews(user_id=user_id, viewer_id=get_viewer_id(request))
        return Response(ReviewSerializer(reviews, many=True).data)

    @extend_schema(request=None, responses={200: ReviewSerializer}, tags=['reviews'])
    @action(detail=True, methods=['post'], permission_classes=[IsAuthenticated])
    def like(self, request, pk=None):
        """Like a review using service layer."""
        review = like_review(review_id=pk, user_id=request.user.id)
        return Response(ReviewSerializer(review).data)

    @extend_schema(request=None, responses={200: ReviewSerializer}, tags=['reviews'])
    @like.mapping.delete
    def unlike(self, request, pk=None):
        """Remove the current user's like using service layer."""
        review = unlike_review(review_id=pk, user_id=request.user.id)
        return Response(ReviewSerializer(review).data)
