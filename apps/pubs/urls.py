from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'pubs'

router = SimpleRouter()
router.register(r'', views.PubViewSet, basename='pub')

urlpatterns = [
    # GET    /api/pubs/?sortBy=asc|desc  - List pubs
    # GET    /api/pubs/{id}/             - Get pub
    path('', include(router.urls)),
]
