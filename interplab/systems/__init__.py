"""Demonstration systems for the ODE integrators."""

from interplab.systems.spring_mass import (
    CoupledSpringMassSystem,
    OdeSystem,
    SingleSpringMassSystem,
)

__all__ = [
    "CoupledSpringMassSystem",
    "OdeSystem",
    "SingleSpringMassSystem",
]
