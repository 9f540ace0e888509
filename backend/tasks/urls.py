from django.urls import path
from .views import list_create_view
from .views import retrieve_update_destroy_view
from .views import complete_view, uncomplete_view
from .views import recommend_view

urlpatterns=[
    # GET and POST (List tasks and Create new task)
    path('',list_create_view,name="create-list-view"),

    path('recommend/',recommend_view,name="recommend"),
    
    # GET, PUT, PATCH, DELETE (Detail and Manipulation)
    path('<int:pk>/',retrieve_update_destroy_view,name="task-detail"),
    path('<int:pk>/complete/',complete_view,name="task-complete"),
    path('<int:pk>/uncomplete/',uncomplete_view,name="task-uncomplete"),

]
