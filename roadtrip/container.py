"""Wiring of ports to adapters.

``Container.create_default`` binds every port the road-trip service needs
to its file/Dijkstra/table adapter. Tests swap single bindings with
``register``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple

from .config import AppConfig, get_config


@dataclass
class Container:
    """Maps a port type to the factory building its adapter.

    Attributes:
        config: Application configuration handed to the adapters
    """

    config: AppConfig = field(default_factory=get_config)

    _bindings: Dict[type, Tuple[Callable[[], Any], bool]] = field(
        default_factory=dict, repr=False
    )
    _instances: Dict[type, Any] = field(default_factory=dict, repr=False)

    def register(
        self,
        port_type: type,
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Bind ``port_type`` to ``factory``, replacing any earlier binding.

        A singleton binding builds its instance on the first ``resolve``
        and hands out that same instance afterwards.
        """
        self._bindings[port_type] = (factory, singleton)
        self._instances.pop(port_type, None)

    def resolve(self, port_type: type) -> Any:
        """Build (or reuse) the adapter bound to ``port_type``.

        Raises:
            KeyError: If nothing is bound to the type.
        """
        try:
            factory, singleton = self._bindings[port_type]
        except KeyError:
            raise KeyError(f"Type not registered: {port_type}") from None

        if not singleton:
            return factory()
        if port_type not in self._instances:
            self._instances[port_type] = factory()
        return self._instances[port_type]

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Container with the production adapters for ``config``."""
        from .adapters.graph import DijkstraRouteSolver, FileGraphRepository
        from .adapters.naming import TableNameNormalizer
        from .ports.graph import (
            GraphRepositoryPort,
            NameNormalizerPort,
            RouteSolverPort,
        )
        from .services import RoadTripService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            NameNormalizerPort, lambda: TableNameNormalizer(config.naming)
        )
        container.register(
            GraphRepositoryPort,
            lambda: FileGraphRepository(
                config.graph, container.resolve(NameNormalizerPort)
            ),
        )
        container.register(RouteSolverPort, DijkstraRouteSolver)
        container.register(
            RoadTripService,
            lambda: RoadTripService(
                graph_repository=container.resolve(GraphRepositoryPort),
                route_solver=container.resolve(RouteSolverPort),
                name_normalizer=container.resolve(NameNormalizerPort),
            ),
        )
        return container
