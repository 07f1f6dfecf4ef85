"""
Profiles app views

Retrieve, update or clear the career profile.
"""
from rest_framework import generics, status
from rest_framework.response import Response

from .models import CareerProfile
from .serializers import CareerProfileSerializer, empty_profile


class CareerProfileView(generics.GenericAPIView):
    """
    GET /api/profile/ - Current profile, or an empty shape when none is saved
    PUT/PATCH /api/profile/ - Create or update the profile
    DELETE /api/profile/ - Remove the profile

    Reading never creates a row.
    """

    serializer_class = CareerProfileSerializer

    def get(self, request, *args, **kwargs):
        profile = CareerProfile.load()
        if profile is None:
            return Response(empty_profile())
        return Response(self.get_serializer(profile).data)

    def put(self, request, *args, **kwargs):
        return self._save(request, partial=False)

    def patch(self, request, *args, **kwargs):
        return self._save(request, partial=True)

    def delete(self, request, *args, **kwargs):
        profile = CareerProfile.load()
        if profile is not None:
            profile.delete()
        return Response(status=status.HTTP_204_NO_CONTENT)

    def _save(self, request, *, partial):
        profile = CareerProfile.load()
        serializer = self.get_serializer(profile, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(
            serializer.data,
            status=status.HTTP_201_CREATED if profile is None else status.HTTP_200_OK,
        )
