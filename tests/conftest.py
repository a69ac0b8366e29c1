import pytest

from skim.builtin.env_builtin import register
from skim.interpreter import Interpreter
from skim.types.environment import Environment


@pytest.fixture
def interp():
    """Fresh interpreter with the primitive library loaded; arena released afterwards."""
    it = Interpreter()
    yield it
    it.close()


@pytest.fixture
def env(interp):
    """Global frame of a fresh interpreter."""
    return interp.env


@pytest.fixture
def bare_env():
    """Environment with builtins but no interpreter around it."""
    e = Environment()
    register(e)
    return e
