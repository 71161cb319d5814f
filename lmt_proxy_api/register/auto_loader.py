from __future__ import annotations

import pkgutil
import inspect
import importlib

from typing import Iterable, Optional, Type, List, Set

from lmt_proxy_lib.utils.logger import prepare_logger
from lmt_proxy_lib.data_models.config import UpstreamConfig

from lmt_proxy_api.endpoints.endpoint_i import EndpointI


class EndpointAutoLoader:
    """
    Auto-discovery loader for EndpointI subclasses.

    This utility imports a target package (and its subpackages), discovers all
    concrete subclasses of a given base class (EndpointI) and instantiates
    them with the shared service configuration.
    """

    def __init__(
        self,
        base_class: Type[EndpointI],
        upstream_config: Optional[UpstreamConfig] = None,
        logger_file_name: Optional[str] = None,
        logger_level: Optional[str] = "DEBUG",
    ):
        """
        Parameters
        ----------
        base_class : Type[EndpointI]
            The common base class used to discover and type-check endpoints.
        upstream_config : UpstreamConfig, optional
            Engine settings passed to every endpoint.
        logger_file_name: str, optional
            Logger file name, if not given, then only console is used.
        logger_level: str, optional (default="DEBUG")
            Logger level. Defaults to "DEBUG".
        """
        self.base_class = base_class
        self.upstream_config = upstream_config
        self.logger_file_name = logger_file_name
        self.logger_level = logger_level

        self._logger = prepare_logger(
            logger_name=__name__,
            logger_file_name=logger_file_name,
            log_level=logger_level,
        )

    def discover_classes_in_package(
        self, package_name: str
    ) -> List[Type[EndpointI]]:
        """
        Import all modules in the provided package and return EndpointI subclasses.

        Notes
        -----
        - The package must be importable (present on PYTHONPATH).
        - Only non-abstract subclasses whose __module__ starts with the
          package_name are returned.

        Parameters
        ----------
        package_name : str
            Fully qualified package name to search in
            (e.g., "lmt_proxy_api.endpoints").
        """
        pkg = importlib.import_module(package_name)
        discovered: List[Type[EndpointI]] = []

        # Import submodules to ensure classes are registered in __subclasses__()
        for mod_info in pkgutil.walk_packages(pkg.__path__, pkg.__name__ + "."):
            importlib.import_module(mod_info.name)

        # Collect all subclasses recursively
        def all_subclasses(cls_obj: Type[EndpointI]) -> Set[Type[EndpointI]]:
            subs: Set[Type[EndpointI]] = set()
            for sub in cls_obj.__subclasses__():
                subs.add(sub)
                subs.update(all_subclasses(sub))
            return subs

        for cls in all_subclasses(self.base_class):
            if inspect.isabstract(cls):
                continue
            if cls.__module__.startswith(package_name):
                discovered.append(cls)

        # Stable registration order
        return sorted(discovered, key=lambda c: (c.__module__, c.__name__))

    def instantiate_with_defaults(
        self, classes: Iterable[Type[EndpointI]]
    ) -> List[EndpointI]:
        """
        Instantiate provided classes with the loader's logger settings and
        engine configuration.

        Any class whose constructor does not accept these arguments is
        skipped with a warning.
        """
        instances: List[EndpointI] = []
        for cls in classes:
            try:
                instances.append(
                    cls(
                        logger_file_name=self.logger_file_name,
                        logger_level=self.logger_level,
                        upstream_config=self.upstream_config,
                    )
                )
                self._logger.debug(f"Instantiating {cls.__name__}")
            except TypeError as e:
                self._logger.warning(
                    f"Cannot instantiate {cls.__name__} with defaults: {str(e)}"
                )
        return instances
