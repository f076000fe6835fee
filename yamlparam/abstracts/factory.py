##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
Base factory class for managing pluggable components.

This module defines an abstract `YamlParamBaseFactory` class that keeps a
registry of components and their aliases, discovers third-party components
through Python entry points, and instantiates registered components by name.

Subclasses define how to register built-in components, how to validate a
component class, and which entry point group to search.
"""

import logging
from abc import ABC, abstractmethod
from importlib.metadata import entry_points
from typing import Any, Dict, List


LOG = logging.getLogger(__name__)


def _iter_entry_points(group: str):
    """Return the entry points registered under `group`."""
    eps = entry_points()
    if hasattr(eps, "select"):
        return eps.select(group=group)
    return eps.get(group, [])


class YamlParamBaseFactory(ABC):
    """
    Abstract base factory for managing and instantiating pluggable components.

    Subclasses are required to:
        - Implement `_register_builtins()` to register default implementations
        - Implement `_validate_component()` to enforce interface/type constraints
        - Define `_entry_point_group()` to identify the entry point namespace for discovery

    Attributes:
        _registry (Dict[str, Any]): Maps canonical component names to their classes.
        _aliases (Dict[str, str]): Maps alias names to canonical component names.

    Methods:
        register: Register a new component and its optional aliases.
        resolve: Return the registered class for a name or alias.
        list_available: Return a list of all registered component names.
        create: Instantiate a registered component by name or alias.
    """

    def __init__(self):
        # Map canonical names to implementation classes
        self._registry: Dict[str, Any] = {}

        # Map aliases to canonical names
        self._aliases: Dict[str, str] = {}
        self._plugins_loaded = False

        self._register_builtins()

    @abstractmethod
    def _register_builtins(self):
        """Register built-in components."""
        raise NotImplementedError("Subclasses of `YamlParamBaseFactory` must implement a `_register_builtins` method.")

    @abstractmethod
    def _validate_component(self, component_class: Any):
        """
        Validate the component class before registration.

        Args:
            component_class: The class to validate.

        Raises:
            TypeError: If `component_class` is not valid.
        """
        raise NotImplementedError("Subclasses of `YamlParamBaseFactory` must implement a `_validate_component` method.")

    @abstractmethod
    def _entry_point_group(self) -> str:
        """Return the entry point group used for plugin discovery."""
        raise NotImplementedError("Subclasses must define an entry point group.")

    def _discover_plugins(self):
        """
        Discover and register plugins via Python entry points. Discovery runs
        once per factory; a plugin that fails to load is logged and skipped.
        """
        if self._plugins_loaded:
            return
        self._plugins_loaded = True
        for entry_point in _iter_entry_points(self._entry_point_group()):
            try:
                plugin_class = entry_point.load()
                self.register(entry_point.name, plugin_class)
                LOG.info(f"Loaded plugin via entry point: {entry_point.name}")
            except Exception as e:  # pylint: disable=broad-exception-caught
                LOG.warning(f"Failed to load plugin '{entry_point.name}': {e}")

    def _raise_component_error_class(self, msg: str):
        """
        Raise an appropriate exception when an invalid component is requested.

        Subclasses should override this to raise more specific exceptions.

        Args:
            msg: The message to add to the error being raised.

        Raises:
            ValueError: By default.
        """
        raise ValueError(msg)

    def register(self, name: str, component_class: Any, aliases: List[str] = None) -> None:
        """
        Register a new component implementation.

        Args:
            name: Canonical name for the component.
            component_class: The class or implementation to register.
            aliases: Optional alternative names for this component.

        Raises:
            TypeError: If the component_class fails validation.
        """
        self._validate_component(component_class)

        self._registry[name] = component_class
        LOG.debug(f"Registered component: {name}")

        if aliases:
            for alias in aliases:
                self._aliases[alias] = name
                LOG.debug(f"Registered alias '{alias}' for component '{name}'")

    def list_available(self) -> List[str]:
        """
        Return the canonical names of all built-in and discovered components.
        """
        self._discover_plugins()
        return list(self._registry.keys())

    def resolve(self, component_type: str) -> Any:
        """
        Retrieve a registered component class by name or alias.

        Args:
            component_type: The name or alias provided by the user.

        Returns:
            The class object corresponding to the requested component.

        Raises:
            Exception: Raises the result of `_raise_component_error_class` if the component is not registered.
        """
        canonical_name = self._aliases.get(component_type, component_type)
        if canonical_name not in self._registry:
            self._discover_plugins()

        component_class = self._registry.get(canonical_name)
        if component_class is None:
            available = ", ".join(self.list_available())
            self._raise_component_error_class(
                f"Component '{component_type}' is not supported. Available components: {available}"
            )

        return component_class

    def create(self, component_type: str, config: Dict = None) -> Any:
        """
        Instantiate and return a component of the specified type.

        Args:
            component_type: The name or alias of the component to create.
            config: Optional keyword arguments for initializing the component.

        Returns:
            An instance of the requested component.

        Raises:
            ValueError: If instantiation fails.
        """
        component_class = self.resolve(component_type)
        try:
            return component_class() if config is None else component_class(**config)
        except Exception as e:
            raise ValueError(f"Failed to create component '{component_type}': {e}") from e
