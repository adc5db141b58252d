"""
Shared pytest fixtures for interplab tests.
"""

import logging
from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def test_output_root() -> Path:
    """
    Root test_output directory, created once per session. Plots and CSVs
    written here persist after the run for inspection.
    """
    output_dir = Path(__file__).parent.parent / "test_output"
    output_dir.mkdir(exist_ok=True)
    return output_dir


@pytest.fixture
def test_output_dir(request, test_output_root) -> Path:
    """
    Per-test artefact directory: test_output/<module_name>/<test_name>/

    Example usage:
        def test_rk4_plot(test_output_dir):
            comparison = run_ode_experiment()
            plot_ode_comparison(comparison, test_output_dir / "rk4.png")
    """
    module_name = request.module.__name__.split(".")[-1]
    test_name = request.node.name

    test_dir = test_output_root / module_name / test_name
    test_dir.mkdir(parents=True, exist_ok=True)
    return test_dir


def _reset_logger(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        if not isinstance(handler, logging.NullHandler):
            handler.close()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def reset_interplab_logging():
    """Give every test the library default: NullHandler only, level NOTSET."""
    logger = logging.getLogger("interplab")
    _reset_logger(logger)
    yield
    _reset_logger(logger)
