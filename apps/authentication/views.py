from rest_framework import generics, permissions

from .serializers import UserSerializer


class MeView(generics.RetrieveUpdateAPIView):
    """Profile of the signed-in user; only the display name can be changed."""

    serializer_class = UserSerializer
    permission_classes = [permissions.IsAuthenticated]
    http_method_names = ["get", "patch", "head", "options"]

    def get_object(self):
        return self.request.user
