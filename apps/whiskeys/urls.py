from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'whiskeys'

router = DefaultRouter()
router.register(r'', views.WhiskeyViewSet, basename='whiskey')

urlpatterns = [
    # GET    /api/whiskeys/              - List own whiskeys (?type=&distillery=)
    # POST   /api/whiskeys/              - Create whiskey
    # GET    /api/whiskeys/{id}/         - Get whiskey
    # PUT    /api/whiskeys/{id}/         - Update whiskey
    # PATCH  /api/whiskeys/{id}/         - Update whiskey
    # DELETE /api/whiskeys/{id}/         - Delete whiskey

    # Custom actions
    # GET    /api/whiskeys/search/?q=    - Search own whiskeys
    # GET    /api/whiskeys/export/csv/   - Download CSV
    # POST   /api/whiskeys/import/csv/   - Upload CSV

    path('', include(router.urls)),
]
