"""Configuration dataclasses for OpenModelica simulation runs.

This module defines the inputs consumed by `SimulationRunner`. The dataclasses
are plain Python structures so they can be created in user scripts and tests
without starting an OMC session.

Library and file lists keep the colon-separated form used on the command line
of OpenModelica tooling; `remote_om.commands` splits and pairs them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace

from .environment import default_openmodelica_home

RESULT_SUFFIX = "_res.mat"
DEFAULT_NUMBER_OF_INTERVALS = 500


@dataclass(slots=True)
class ExperimentConfig:
    """Experiment settings forwarded to `simulate(...)`.

    Attributes:
        start_time: Start time of the simulation; omitted when zero.
        stop_time: Stop time of the simulation; if it is not greater than
            `start_time`, the model's experiment annotation is used.
        tolerance: Integration tolerance, always sent.
        number_of_intervals: Number of output intervals; only sent when it
            differs from the OMC default of 500.
    """

    start_time: float = 0.0
    stop_time: float = 0.0
    tolerance: float = 1e-6
    number_of_intervals: int = DEFAULT_NUMBER_OF_INTERVALS


@dataclass(slots=True)
class SimulationConfig:
    """Top-level settings for one simulation run.

    Attributes:
        sys_libs: System libraries known to OMC, separated by `:`.
        sys_vers: Library versions separated by `:`; either one entry per
            library or fewer entries, in which case versions are ignored.
        work_files: Modelica files located in `work_dir`, separated by `:`.
        files: Additional Modelica files given by absolute path, separated
            by `:`.
        work_dir: Directory the result file is copied to.
        sim_dir: Scratch directory OMC builds and simulates in. It is removed
            and recreated on every run.
        openmodelica_home: Value applied to `OPENMODELICAHOME` before the
            session is started.
        experiment: Experiment settings for `simulate(...)`.
        legacy_start_time_overwrite: Let a non-zero start time replace the
            tolerance clause instead of being appended to it. Stop time and
            interval count are still appended.
    """

    sys_libs: str = "Modelica"
    sys_vers: str = ""
    work_files: str = ""
    files: str = ""
    work_dir: str = "/work"
    sim_dir: str = "/tmp/OpenModelica"
    openmodelica_home: str = field(default_factory=default_openmodelica_home)
    experiment: ExperimentConfig = field(default_factory=ExperimentConfig)
    legacy_start_time_overwrite: bool = False

    def validate(self) -> None:
        """Raise `ValueError` for settings OMC would reject or misread."""
        if self.experiment.tolerance <= 0.0:
            raise ValueError("experiment.tolerance must be > 0")
        if self.experiment.number_of_intervals <= 0:
            raise ValueError("experiment.number_of_intervals must be > 0")
        if not self.sim_dir:
            raise ValueError("sim_dir must not be empty")

    def resolved(self, base_dir: str | None = None) -> SimulationConfig:
        """Return a copy with `work_dir` and `sim_dir` made absolute.

        Relative directories are taken against `base_dir`, or the current
        working directory when omitted. The runner changes into `sim_dir`,
        so every path it uses afterwards must already be absolute.
        """
        base = os.getcwd() if base_dir is None else base_dir
        return replace(
            self,
            work_dir=os.path.abspath(os.path.join(base, self.work_dir)),
            sim_dir=os.path.abspath(os.path.join(base, self.sim_dir)),
        )

    def work_file_paths(self) -> list[str]:
        """Return the non-empty `work_files` entries joined onto `work_dir`."""
        return [
            os.path.join(self.work_dir, name)
            for name in self.work_files.split(":")
            if name != ""
        ]

    def extra_file_paths(self) -> list[str]:
        """Return the non-empty `files` entries unchanged."""
        return [name for name in self.files.split(":") if name != ""]

    def artifact_path(self, model: str) -> str:
        """Path of the result file OMC writes for `model` inside `sim_dir`."""
        return os.path.join(self.sim_dir, f"{model}{RESULT_SUFFIX}")

    def result_path(self, model: str) -> str:
        """Path the result file for `model` is copied to inside `work_dir`."""
        return os.path.join(self.work_dir, f"{model}{RESULT_SUFFIX}")
