"""OMC command text for the simulation workflow.

`SimulationRequest` holds everything a run will send to the session in
structured form. It is built and validated from a `SimulationConfig` before
any remote call is made, and serialized to OMC scripting expressions only
when the runner issues each step.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePath

from .config import DEFAULT_NUMBER_OF_INTERVALS, ExperimentConfig, SimulationConfig


@dataclass(slots=True, frozen=True)
class LibraryLoad:
    """One system library to load, optionally pinned to a version."""

    name: str
    version: str | None = None

    def to_expression(self) -> str:
        return load_model_expression(self.name, self.version)


@dataclass(slots=True)
class SimulationRequest:
    """Validated, ordered set of commands for one model."""

    model: str
    sim_dir: str
    libraries: list[LibraryLoad] = field(default_factory=list)
    files: list[str] = field(default_factory=list)
    options: str = ""

    @classmethod
    def from_config(cls, model: str, config: SimulationConfig) -> "SimulationRequest":
        """Build the request for `model`, raising `ValueError` on bad input."""
        if not model:
            raise ValueError("model name must not be empty")
        config.validate()
        return cls(
            model=model,
            sim_dir=config.sim_dir,
            libraries=pair_libraries(config.sys_libs, config.sys_vers),
            files=config.work_file_paths() + config.extra_file_paths(),
            options=simulate_options(
                config.experiment,
                legacy_start_time_overwrite=config.legacy_start_time_overwrite,
            ),
        )

    def instantiate_expression(self) -> str:
        return instantiate_expression(self.model)

    def simulate_expression(self) -> str:
        return simulate_expression(self.model, self.options)


def split_entries(text: str) -> list[str]:
    """Split a colon-separated list, keeping empty entries in place."""
    return text.split(":")


def pair_libraries(sys_libs: str, sys_vers: str) -> list[LibraryLoad]:
    """Pair library names with versions.

    If fewer versions than libraries are given, versions are ignored for all
    libraries. If the counts match, library k is loaded with version k, or
    unversioned when that entry is empty. More versions than libraries is a
    configuration error. Empty library entries are skipped.
    """
    names = split_entries(sys_libs)
    versions = split_entries(sys_vers)
    if len(versions) > len(names):
        raise ValueError(
            "sys_libs and sys_vers entries separated by ':' are not equal: "
            f"{len(names)} libraries, {len(versions)} versions"
        )

    loads = []
    if len(names) > len(versions):
        for name in names:
            if name != "":
                loads.append(LibraryLoad(name))
        return loads

    for name, version in zip(names, versions):
        if name == "":
            continue
        loads.append(LibraryLoad(name, version or None))
    return loads


def simulate_options(
    experiment: ExperimentConfig,
    *,
    legacy_start_time_overwrite: bool = False,
) -> str:
    """Assemble the optional-argument tail of a `simulate(...)` call.

    The tolerance is always present. Start time is added when non-zero, stop
    time when it is greater than the start time, and the number of intervals
    when it differs from the OMC default.

    With `legacy_start_time_overwrite`, a non-zero start time replaces the
    tolerance clause instead of being appended to it. Only that replacement
    is kept; the stop time and interval count are still appended.
    """
    opts = f",tolerance={experiment.tolerance}"
    if experiment.start_time != 0:
        clause = f", startTime={experiment.start_time}"
        opts = clause if legacy_start_time_overwrite else opts + clause
    if experiment.stop_time > experiment.start_time:
        opts += f", stopTime={experiment.stop_time}"
    if experiment.number_of_intervals != DEFAULT_NUMBER_OF_INTERVALS:
        opts += f", numberOfIntervals={experiment.number_of_intervals}"
    return opts


def _as_posix(path) -> str:
    # OMC strings treat a backslash as an escape.
    if isinstance(path, PurePath):
        return path.as_posix()
    return Path(path).as_posix()


def cd_expression(path) -> str:
    return f'cd("{_as_posix(path)}")'


def load_model_expression(name: str, version: str | None = None) -> str:
    if version:
        return f'loadModel({name},{{"{version}"}})'
    return f"loadModel({name})"


def load_file_expression(path) -> str:
    return f'loadFile("{_as_posix(path)}")'


def instantiate_expression(model: str) -> str:
    return f"instantiateModel({model})"


def simulate_expression(model: str, options: str = "") -> str:
    return f"simulate({model}{options})"
