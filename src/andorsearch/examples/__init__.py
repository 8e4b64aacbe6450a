"""Built-in example problems."""

from andorsearch.examples.vacuum import ErraticVacuumWorld, VacuumState

__all__ = ["ErraticVacuumWorld", "VacuumState"]
