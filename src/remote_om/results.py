"""Result containers and result-file loading.

Step and outcome records are plain Python structures intended for logging,
testing, and reacting to failed steps. Result files are read with DyMat and
returned as-is.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any

import DyMat

from .config import RESULT_SUFFIX

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class StepResult:
    """Outcome of one command sent to the OMC session."""

    label: str
    command: str
    status: Any = None
    ok: bool = False


@dataclass(slots=True)
class SimulationOutcome:
    """Everything a simulation run produced.

    Attributes:
        model: Simulated model name.
        steps: Remote steps in the order they were issued.
        result_file: Path of the result file copied into the work directory.
        result: Parsed result file (`DyMat.DyMatFile`), or `None` before it is
            loaded.
    """

    model: str
    steps: list[StepResult] = field(default_factory=list)
    result_file: str | None = None
    result: Any = None

    def add_step(self, step: StepResult) -> None:
        """Append one step to the outcome sequence."""
        self.steps.append(step)

    @property
    def failed_steps(self) -> list[StepResult]:
        return [step for step in self.steps if not step.ok]

    @property
    def succeeded(self) -> bool:
        """True when every remote step reported success."""
        return not self.failed_steps


def result_file_name(model: str) -> str:
    """Return the result file name OMC uses for `model`."""
    return f"{model}{RESULT_SUFFIX}"


def load_result(res_file: str, res_dir: str = "/work"):
    """Load an OpenModelica result file with DyMat.

    Args:
        res_file: Result file name including the `.mat` extension.
        res_dir: Directory holding the result file.

    Returns:
        The `DyMat.DyMatFile` for the file, untransformed.
    """
    path = os.path.join(res_dir, res_file)
    logger.info("Reading result file from: %s", path)
    return DyMat.DyMatFile(path)
