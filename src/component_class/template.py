"""
Template for concrete components.

Copy this module when writing a new component: declare dependencies and
features in ``__init__``, resolve dependencies in ``init()``, release them in
``shutdown()``.
"""

from typing import Any

from component_class.component import Component
from component_class.manager import ComponentManager


class TemplateComponent(Component):
    """Example component depending on a ``logger`` component."""

    def __init__(self, manager: ComponentManager) -> None:
        super().__init__(manager)

        self.option: Any = None
        self._log: Any = None

        self.add_feature("config-option", self.config_option)

        self.add_dependency("logger")

    def init(self) -> None:
        logger = self.resolve_dependency("logger")
        self._log = logger.create("TemplateComponent")
        self._log.debug("Starting TemplateComponent ...")

    def shutdown(self) -> None:
        # init() may have failed before the logger was bound
        if self._log is not None:
            self._log.debug("Shutting down TemplateComponent.")
            self._log = None

    def config_option(self, opts: Any = None) -> None:
        self.option = opts
        if self._log is not None:
            self._log.debug("Setting option", option=opts)
