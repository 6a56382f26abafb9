"""
Synthetic data from the normal linear regression model.

Usage:
    from regsim.simulation import ModelParameters, simulate

    params = ModelParameters(intercept=-2.0, slope=1.25, noise_std=3.0)
    rng = np.random.default_rng(7)
    sample = simulate(50, (0.0, 10.0), params, rng)
"""

from regsim.simulation.design import ModelParameters, SimulationDesign
from regsim.simulation.solvers import simulate, simulate_response

__all__ = [
    "ModelParameters",
    "SimulationDesign",
    "simulate",
    "simulate_response",
]
