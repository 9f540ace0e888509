# users/tests.py
"""
Users App Test Suite
====================

Tests for account creation and token-based login.

Test Categories:
----------------
1. Manager Tests - email normalization, superuser flags
2. Registration API Tests
3. Login / Me API Tests
"""

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient, APITestCase

User = get_user_model()


# ===========================================================================
# MANAGER TESTS
# ===========================================================================

class CustomUserManagerTest(TestCase):

    def test_create_user_lowercases_email(self):
        user = User.objects.create_user(email='Alice@Example.COM', password='secret123')

        self.assertEqual(user.email, 'alice@example.com')
        self.assertTrue(user.check_password('secret123'))
        self.assertFalse(user.is_staff)

    def test_create_user_without_email_raises(self):
        with self.assertRaises(ValueError):
            User.objects.create_user(email='', password='secret123')

    def test_create_superuser_sets_flags(self):
        admin = User.objects.create_superuser(email='root@example.com', password='secret123')

        self.assertTrue(admin.is_staff)
        self.assertTrue(admin.is_superuser)
        self.assertTrue(admin.is_active)

    def test_create_superuser_rejects_non_staff(self):
        with self.assertRaises(ValueError):
            User.objects.create_superuser(
                email='root@example.com', password='secret123', is_staff=False
            )


# ===========================================================================
# API TESTS
# ===========================================================================

class RegistrationAPITest(APITestCase):

    def setUp(self):
        self.client = APIClient()
        self.register_url = '/api/v1/auth/register/'

    def test_register_returns_tokens_and_user(self):
        response = self.client.post(
            self.register_url,
            {'email': 'new@example.com', 'password': 'secret123'},
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['message'], 'Account created successfully')
        self.assertEqual(response.data['user']['email'], 'new@example.com')
        self.assertIn('access', response.data)
        self.assertIn('refresh', response.data)
        self.assertNotIn('password', response.data['user'])
        self.assertEqual(User.objects.count(), 1)

    def test_duplicate_email_rejected_case_insensitively(self):
        User.objects.create_user(email='taken@example.com', password='secret123')

        response = self.client.post(
            self.register_url,
            {'email': 'TAKEN@example.com', 'password': 'secret123'},
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('email', response.data)
        self.assertEqual(User.objects.count(), 1)

    def test_short_password_rejected(self):
        response = self.client.post(
            self.register_url,
            {'email': 'new@example.com', 'password': '123'},
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('password', response.data)

    def test_invalid_email_rejected(self):
        response = self.client.post(
            self.register_url,
            {'email': 'not-an-email', 'password': 'secret123'},
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class LoginAPITest(APITestCase):

    def setUp(self):
        self.user = User.objects.create_user(email='login@example.com', password='secret123')
        self.client = APIClient()
        self.login_url = '/api/v1/auth/login/'
        self.me_url = '/api/v1/auth/me/'

    def test_login_returns_token_pair(self):
        response = self.client.post(
            self.login_url,
            {'email': 'login@example.com', 'password': 'secret123'},
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['message'], 'Welcome back')
        self.assertEqual(response.data['user']['id'], self.user.id)
        self.assertIn('access', response.data)
        self.assertIn('refresh', response.data)

    def test_login_email_is_case_insensitive(self):
        response = self.client.post(
            self.login_url,
            {'email': 'LOGIN@example.com', 'password': 'secret123'},
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_wrong_password_is_unauthorized(self):
        response = self.client.post(
            self.login_url,
            {'email': 'login@example.com', 'password': 'wrong-password'},
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_me_with_bearer_token(self):
        login = self.client.post(
            self.login_url,
            {'email': 'login@example.com', 'password': 'secret123'},
            format='json'
        )
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['access']}")

        response = self.client.get(self.me_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['email'], 'login@example.com')

    def test_me_requires_authentication(self):
        response = self.client.get(self.me_url)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class HealthAPITest(APITestCase):

    def test_health_is_public(self):
        response = self.client.get('/api/health/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], 'ok')

    def test_health_served_for_default_local_host(self):
        response = self.client.get('/api/health/', HTTP_HOST='localhost')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
