"""Drive an OMC session through a load-instantiate-simulate sequence.

`SimulationRunner` is the entrypoint for simulating a Modelica model and
collecting its result file. The sequence is fixed:

- reset the simulation directory and start an OMC session there,
- load system libraries, work files and additional files,
- instantiate and simulate the model,
- copy the result file to the work directory and read it with DyMat.

A failed remote step is logged and recorded in the returned outcome; it does
not stop the sequence. The process working directory is restored before
returning.
"""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass, field
from typing import Any, Callable

import OMPython

from .commands import SimulationRequest, cd_expression, load_file_expression
from .config import SimulationConfig
from .environment import configure_environment
from .results import SimulationOutcome, StepResult, load_result

logger = logging.getLogger(__name__)


def _answered_true(status: Any) -> bool:
    return status is True


def _answered_nonempty(status: Any) -> bool:
    return status is not None and status != "" and status is not False


def _simulation_succeeded(status: Any) -> bool:
    # simulate() answers with a record; an empty resultFile means it failed.
    if isinstance(status, dict):
        return bool(status.get("resultFile"))
    return _answered_nonempty(status)


@dataclass(slots=True)
class SimulationRunner:
    """Execute a configured simulation through an OMC session.

    `session_factory` returns an object with a `sendExpression(text)` method;
    by default a new `OMPython.OMCSessionZMQ` is started for each run.
    """

    config: SimulationConfig = field(default_factory=SimulationConfig)
    session_factory: Callable[[], Any] | None = None

    def run(self, model: str) -> SimulationOutcome:
        """Simulate `model` and return the step records and parsed result.

        Raises:
            ValueError: If the configuration is inconsistent, for example
                more library versions than libraries. Nothing is sent to OMC
                and no directory is touched in that case.
            OSError: If the result file cannot be copied, typically because
                the simulation did not produce it.
        """
        local_dir = os.getcwd()
        self.config.validate()
        cfg = self.config.resolved(local_dir)
        request = SimulationRequest.from_config(model, cfg)
        outcome = SimulationOutcome(model=model)

        configure_environment(cfg.openmodelica_home)
        _reset_directory(cfg.sim_dir)
        omc = None
        try:
            os.chdir(cfg.sim_dir)
            omc = self._start_session()
            self._step(omc, outcome, cd_expression(cfg.sim_dir), _answered_nonempty)

            for library in request.libraries:
                self._step(omc, outcome, library.to_expression(), _answered_true)
            for path in request.files:
                self._step(omc, outcome, load_file_expression(path), _answered_true)

            self._step(omc, outcome, request.instantiate_expression(), _answered_nonempty)
            self._step(omc, outcome, request.simulate_expression(), _simulation_succeeded)

            outcome.result_file = _copy_result(
                cfg.artifact_path(model), cfg.result_path(model)
            )
        finally:
            os.chdir(local_dir)
            if omc is not None:
                _close_session(omc)

        res_dir, res_file = os.path.split(outcome.result_file)
        outcome.result = load_result(res_file, res_dir)
        if not outcome.succeeded:
            logger.warning(
                "Simulation of %s finished with %d failed step(s): %s",
                model,
                len(outcome.failed_steps),
                ", ".join(step.label for step in outcome.failed_steps),
            )
        return outcome

    def _start_session(self):
        if self.session_factory is not None:
            return self.session_factory()
        return OMPython.OMCSessionZMQ()

    @staticmethod
    def _step(omc, outcome: SimulationOutcome, command: str, check) -> StepResult:
        status = omc.sendExpression(command)
        ok = check(status)
        if ok:
            logger.info("  %s successful", command)
        else:
            logger.warning("  %s failed", command)
        step = StepResult(label=command.split("(", 1)[0], command=command, status=status, ok=ok)
        outcome.add_step(step)
        return step


def simulate_model(
    model: str,
    config: SimulationConfig | None = None,
    *,
    session_factory: Callable[[], Any] | None = None,
) -> SimulationOutcome:
    """Simulate `model` with `config` (defaults when omitted)."""
    runner = SimulationRunner(
        config=config if config is not None else SimulationConfig(),
        session_factory=session_factory,
    )
    return runner.run(model)


def _reset_directory(path: str) -> None:
    if os.path.isfile(path) or os.path.islink(path):
        os.remove(path)
    else:
        shutil.rmtree(path, ignore_errors=True)
    os.makedirs(path)


def _copy_result(source: str, destination: str) -> str:
    logger.info("  copy result file from: %s", source)
    logger.info("                     to: %s", destination)
    shutil.copyfile(source, destination)
    return destination


def _close_session(omc) -> None:
    try:
        omc.sendExpression("quit()")
    except Exception:
        logger.warning("Failed to close OMC session", exc_info=True)
