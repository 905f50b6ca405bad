import pytest

from trac.test import EnvironmentStub, Mock

import gravatarimage.macro
import gravatarimage.providers


@pytest.fixture
def env():
    env = EnvironmentStub(enable=['gravatarimage.*'])
    env.get_known_users = lambda: iter([
        ('jane', 'Jane Doe', 'jane@example.org'),
        ('nomail', 'No Mail', None),
    ])
    yield env
    env.reset_db()


@pytest.fixture
def req():
    return Mock(base_url='http://trac.example.org/project')


@pytest.fixture
def secure_req():
    return Mock(base_url='https://trac.example.org/project')
