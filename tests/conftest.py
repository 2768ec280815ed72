from __future__ import annotations

import os

import DyMat
import pytest

from remote_om.config import ExperimentConfig, SimulationConfig


class FakeOMCSession:
    """Records expressions and answers the way OMC does for a healthy model.

    `simulate(...)` writes a dummy result file into the current directory,
    which the runner has changed to the simulation directory.
    """

    def __init__(self, answers=None, write_result=True):
        self.expressions: list[str] = []
        self.answers = dict(answers or {})
        self.write_result = write_result
        self.cwd_at_simulate = None

    def sendExpression(self, expr):
        self.expressions.append(expr)
        head = expr.split("(", 1)[0]
        if head in self.answers:
            return self.answers[head]
        if head == "cd":
            return expr[len('cd("'):-2]
        if head in ("loadModel", "loadFile"):
            return True
        if head == "instantiateModel":
            return "class Dummy\nend Dummy;\n"
        if head == "simulate":
            self.cwd_at_simulate = os.getcwd()
            model = expr[len("simulate("):].split(",", 1)[0].rstrip(")")
            path = os.path.join(os.getcwd(), f"{model}_res.mat")
            if self.write_result:
                with open(path, "w") as fh:
                    fh.write("fresh")
                return {"resultFile": path, "messages": ""}
            return {"resultFile": "", "messages": "Simulation failed"}
        if head == "quit":
            return None
        raise AssertionError(f"unexpected expression {expr!r}")


class FakeDyMatFile:
    def __init__(self, path):
        self.fileName = path
        with open(path) as fh:
            self.content = fh.read()


@pytest.fixture
def fake_dymat(monkeypatch):
    monkeypatch.setattr(DyMat, "DyMatFile", FakeDyMatFile)
    return FakeDyMatFile


@pytest.fixture
def session():
    return FakeOMCSession()


@pytest.fixture
def sim_config(tmp_path):
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    return SimulationConfig(
        work_dir=str(work_dir),
        sim_dir=str(tmp_path / "sim"),
        openmodelica_home="/opt/openmodelica/",
        experiment=ExperimentConfig(),
    )


@pytest.fixture(autouse=True)
def _restore_openmodelica_home(monkeypatch):
    # Tests set OPENMODELICAHOME through the library; undo it afterwards.
    monkeypatch.setenv("OPENMODELICAHOME", os.environ.get("OPENMODELICAHOME", "/usr/"))


@pytest.fixture
def session_cls():
    return FakeOMCSession
