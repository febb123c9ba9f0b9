from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'reviews'

router = SimpleRouter()
router.register(r'', views.ReviewViewSet, basename='review')

urlpatterns = [
    # GET    /api/reviews/                  - List all reviews
    # POST   /api/reviews/                  - Create review
    # GET    /api/reviews/{id}/             - Get review
    # PUT    /api/reviews/{id}/             - Update review
    # DELETE /api/reviews/{id}/             - Delete review
    # GET    /api/reviews/pub/{pub_id}/     - Reviews of a pub
    # GET    /api/reviews/user/{user_id}/   - Reviews by a user
    # POST   /api/reviews/{id}/like/        - Like review
    # DELETE /api/reviews/{id}/like/        - Unlike review
    path('', include(router.urls)),
]
