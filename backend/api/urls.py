from django.urls import path,include
from .views import health_view

urlpatterns=[
    path('health/',health_view,name="health"),
    path('v1/auth/',include('users.urls')),
    path('v1/tasks/',include('tasks.urls'))
]
