"""Pytest configuration file"""

import os

import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "tests.settings")

import django

from tests.sources import MemorySource


def pytest_report_header(config):
    return "Django: " + django.get_version()


def pytest_configure(config):
    django.setup()


@pytest.fixture
def source():
    return MemorySource.with_sample_data()
