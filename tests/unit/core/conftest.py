"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_LEFT = """\
def greet(name):
    print("hello", name)

greet("world")
"""

SAMPLE_RIGHT = """\
def greet(name, punctuation="!"):
    print("hello", name)

greet("world")
greet("again")
"""


@pytest.fixture(name="sample_texts")
def sample_texts_fixture():
    return SAMPLE_LEFT, SAMPLE_RIGHT
