"""Harness scenarios - registered on import."""
from wikiprobe.scenarios import checks  # noqa: F401
from wikiprobe.scenarios.context import ScenarioContext
from wikiprobe.scenarios.registry import Scenario, ScenarioRegistry
from wikiprobe.scenarios.runner import SuiteRunner

__all__ = ["Scenario", "ScenarioContext", "ScenarioRegistry", "SuiteRunner"]
