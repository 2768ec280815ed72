import os

from remote_om.config import SimulationConfig
from remote_om.environment import configure_environment, default_openmodelica_home


def test_configure_environment_defaults_to_usr():
    assert configure_environment() == "/usr/"
    assert os.environ["OPENMODELICAHOME"] == "/usr/"


def test_configure_environment_uses_given_home():
    configure_environment("/opt/openmodelica")
    assert os.environ["OPENMODELICAHOME"] == "/opt/openmodelica"


def test_default_home_follows_environment(monkeypatch):
    monkeypatch.delenv("OPENMODELICAHOME", raising=False)
    assert default_openmodelica_home() == "/usr/"
    assert SimulationConfig().openmodelica_home == "/usr/"

    monkeypatch.setenv("OPENMODELICAHOME", "/opt/om/")
    assert SimulationConfig().openmodelica_home == "/opt/om/"
