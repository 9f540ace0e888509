from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response


@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def health_view(request):
    """Liveness probe; no auth, no database."""
    return Response({'status': 'ok', 'message': 'Contextual Task Engine API is running'})
