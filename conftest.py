"""
Pytest configuration and fixtures for username-directory tests
"""
import os
import pytest


# Set test environment variables before the package reads its configuration
os.environ.update({
    'AWS_DEFAULT_REGION': 'us-east-1',
    'AWS_ACCESS_KEY_ID': 'testing',
    'AWS_SECRET_ACCESS_KEY': 'testing',
    'AWS_SECURITY_TOKEN': 'testing',
    'AWS_SESSION_TOKEN': 'testing',
    'ENVIRONMENT': 'test',
    'USERNAME_DIRECTORY_ENABLE_DEBUG_LOGGING': 'false'
})


@pytest.fixture
def aws_credentials():
    """Mocked AWS Credentials for moto"""
    os.environ.update({
        'AWS_ACCESS_KEY_ID': 'testing',
        'AWS_SECRET_ACCESS_KEY': 'testing',
        'AWS_SECURITY_TOKEN': 'testing',
        'AWS_SESSION_TOKEN': 'testing'
    })


@pytest.fixture
def directory():
    """Fresh, empty username directory"""
    from username_directory.services.username_directory import UsernameDirectory
    return UsernameDirectory()


@pytest.fixture
def seeded_directory(directory):
    """Directory seeded with the registrations used across scenarios"""
    directory.register_username('john_doe', 'U1001')
    directory.register_username('admin', 'U0001')
    return directory
