from .config import ExperimentConfig, SimulationConfig
from .environment import configure_environment
from .results import SimulationOutcome, StepResult, load_result
from .sim_runner import SimulationRunner, simulate_model

__all__ = [
    "ExperimentConfig",
    "SimulationConfig",
    "configure_environment",
    "SimulationOutcome",
    "StepResult",
    "load_result",
    "SimulationRunner",
    "simulate_model",
]
