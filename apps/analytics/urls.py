from django.urls import path
from . import views

app_name = 'analytics'

urlpatterns = [
    # Collection statistics (current user)
    path('summary/', views.collection_summary, name='summary'),
    path('breakdown/', views.collection_breakdown, name='breakdown'),
    path('top-rated/', views.top_rated, name='top-rated'),

    # Dashboard
    path('dashboard/', views.dashboard, name='dashboard'),
]
