from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from accounts.authentication import issue_token
from accounts.models import User
from education.models import Education


class EducationViewSetTests(TestCase):
    def setUp(self) -> None:
        user = User.objects.create_user(username="jane", password="secret-pass")
        self.api = APIClient()
        self.api.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token(user)}")
        self.url = reverse("education-list")

    def test_crud(self) -> None:
        created = self.api.post(
            self.url,
            {
                "institution": "State University",
                "degree": "BSc",
                "field": "Computer Science",
                "graduation_year": 2012,
                "relevant_coursework": ["Compilers"],
            },
            format="json",
        )
        self.assertEqual(created.status_code, status.HTTP_201_CREATED)
        detail = reverse("education-detail", args=[created.json()["id"]])

        updated = self.api.patch(detail, {"degree": "BS"}, format="json")
        self.assertEqual(updated.json()["degree"], "BS")

        self.assertEqual(self.api.delete(detail).status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Education.objects.exists())

    def test_graduation_year_range(self) -> None:
        response = self.api.post(
            self.url,
            {"institution": "U", "degree": "BA", "field": "English", "graduation_year": 1850},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("graduation_year", response.json())

    def test_requires_authentication(self) -> None:
        self.assertEqual(APIClient().get(self.url).status_code, status.HTTP_401_UNAUTHORIZED)
