from django.urls import path
from . import views

app_name = 'administration'

urlpatterns = [
    # Users
    path('users/', views.list_users, name='user-list'),
    path('users/<uuid:user_id>/', views.user_detail, name='user-detail'),
    path('users/<uuid:user_id>/role/', views.update_user_role, name='user-role'),

    # All collections
    path('whiskeys/', views.list_whiskeys, name='whiskey-list'),
]
