"""Scenario registry."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from wikiprobe.scenarios.context import ScenarioContext

ScenarioFunc = Callable[["ScenarioContext"], "dict[str, Any]"]


@dataclass(frozen=True)
class Scenario:
    """A registered check.

    ``func`` returns the observed details on success and raises
    ``ScenarioFailure`` when the check does not hold.
    """

    name: str
    func: ScenarioFunc
    description: str = ""
    requires_browser: bool = True


class ScenarioRegistry:
    """Registry of harness scenarios, in registration order."""

    _scenarios: dict[str, Scenario] = {}

    @classmethod
    def register(
        cls,
        name: str,
        requires_browser: bool = True,
    ) -> Callable[[ScenarioFunc], ScenarioFunc]:
        """Register a scenario function.

        Used as a decorator:
            @ScenarioRegistry.register("api-section", requires_browser=False)
            def api_section(ctx): ...
        """
        def decorator(func: ScenarioFunc) -> ScenarioFunc:
            doc = (func.__doc__ or "").strip().splitlines()
            cls._scenarios[name] = Scenario(
                name=name,
                func=func,
                description=doc[0] if doc else "",
                requires_browser=requires_browser,
            )
            return func
        return decorator

    @classmethod
    def get(cls, name: str) -> Scenario | None:
        return cls._scenarios.get(name)

    @classmethod
    def list_scenarios(cls) -> list[Scenario]:
        return list(cls._scenarios.values())

    @classmethod
    def select(cls, names: list[str] | None = None, api_only: bool = False) -> list[Scenario]:
        """Return the scenarios to run.

        Raises:
            KeyError: A requested name is not registered.
        """
        if names:
            unknown = [n for n in names if n not in cls._scenarios]
            if unknown:
                raise KeyError(f"Unknown scenario(s): {', '.join(unknown)}")
            selected = [cls._scenarios[n] for n in names]
        else:
            selected = cls.list_scenarios()

        if api_only:
            selected = [s for s in selected if not s.requires_browser]
        return selected
