from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView
from .views import register_api_view, login_api_view, user_detail_view


urlpatterns = [
    path('register/',register_api_view, name='auth_register'),
    
    # Simple JWT login endpoint, customized to use the email field
    path('login/', login_api_view, name='token_obtain_pair'),
    
    path('token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),
    path('me/',user_detail_view ,name='user_detail')
]
