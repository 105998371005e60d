import pytest

from inject_gen import InjectorBuilder


@pytest.fixture
def builder() -> InjectorBuilder:
    return InjectorBuilder('com.example', 'MainActivity$$ViewInjector', 'com.example.MainActivity')
