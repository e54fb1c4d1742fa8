"""Dense vectors, matrices, linear system solvers and built-in self-checks."""

__version__ = "0.1.0"
__all__ = ["vector", "matrix", "linear_system", "selftest"]