# tasks/tests/__init__.py
"""
Task App Test Suite
===================

This package contains unit and integration tests for the tasks application.

Modules:
--------
- test_engine: Unit tests for the recommendation engine (filter, scores, ranking)
- test_explanation: Unit tests for the explanation text
- test_api: Endpoint tests for task CRUD, completion and recommendations
- test_recurrence: Recurrence math and the next-occurrence worker

Running Tests:
--------------
    # Run all task tests
    python manage.py test tasks

    # Run specific test module
    python manage.py test tasks.tests.test_engine

    # Or through pytest-django from the repository root
    pytest backend/tasks
"""
