import logging

from rest_framework import generics, permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import Task
from .serializers import (
    RecommendationRequestSerializer,
    RecommendationResultSerializer,
    TaskSerializer,
)
from .services import complete_task, recommend_for_user, reopen_task

logger = logging.getLogger(__name__)


class TaskOwnerPermission(permissions.BasePermission):
    """
    Custom permission to only allow owners of a Task to view, edit, or delete it.
    """
    def has_object_permission(self, request, view, obj):
        return obj.user == request.user


class OwnedTaskMixin:
    permission_classes = [permissions.IsAuthenticated, TaskOwnerPermission]

    # Ensures the user can only access tasks they own; others' ids are 404.
    def get_queryset(self):
        return Task.objects.filter(user=self.request.user)


class TaskListCreateView(OwnedTaskMixin, generics.ListCreateAPIView):
    """
    GET: List all tasks for the authenticated user, newest first.
    POST: Create a new task.
    """
    serializer_class = TaskSerializer
    permission_classes = [permissions.IsAuthenticated]

list_create_view=TaskListCreateView.as_view()


class TaskRetrieveUpdateDestroyView(OwnedTaskMixin, generics.RetrieveUpdateDestroyAPIView):
    """
    GET, PUT, PATCH, DELETE for a specific task instance.
    """
    serializer_class = TaskSerializer

retrieve_update_destroy_view=TaskRetrieveUpdateDestroyView.as_view()


class TaskCompleteView(OwnedTaskMixin, generics.GenericAPIView):
    """
    PATCH: Mark the task as done.
    """
    serializer_class = TaskSerializer

    def patch(self, request, *args, **kwargs):
        task = complete_task(self.get_object())
        return Response({
            'message': 'Nice work! Task completed.',
            'task': self.get_serializer(task).data,
        })

complete_view=TaskCompleteView.as_view()


class TaskUncompleteView(OwnedTaskMixin, generics.GenericAPIView):
    """
    PATCH: Mark the task as not done.
    """
    serializer_class = TaskSerializer

    def patch(self, request, *args, **kwargs):
        task = reopen_task(self.get_object())
        return Response({
            'message': 'Task marked as incomplete',
            'task': self.get_serializer(task).data,
        })

uncomplete_view=TaskUncompleteView.as_view()


class RecommendationView(APIView):
    """
    POST: Pick the task to do now for the given available time and energy.
    Body: {"available_time_minutes": int >= 1, "current_energy": "low"|"medium"|"high"}
    """
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request, *args, **kwargs):
        request_serializer = RecommendationRequestSerializer(data=request.data)
        request_serializer.is_valid(raise_exception=True)
        context = request_serializer.to_context()

        result = recommend_for_user(request.user, context)
        if result.has_recommendation:
            logger.info(
                f"Recommended Task {result.recommended.task.id} to user {request.user.pk} "
                f"(score {result.recommended.score})"
            )
        else:
            logger.info(f"No eligible tasks for user {request.user.pk}")

        return Response(RecommendationResultSerializer(result).data, status=status.HTTP_200_OK)

recommend_view=RecommendationView.as_view()
