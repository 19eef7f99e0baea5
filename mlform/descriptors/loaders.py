import importlib
from typing import Awaitable, Callable

from ..utilities.logger import logger

Loader = Callable[[], Awaitable[None]]
""" Zero-argument coroutine function that resolves once a strategy's implementation is importable and defined. """


def load_component(*module_names: str) -> Loader:
    """ Returns a loader that imports each of module_names in order.
    Importing a component module defines its custom element, so the loader can be called any number of times. """

    async def loader() -> None:
        for module_name in module_names:
            logger.debug(f"Importing component module '{module_name}'")
            importlib.import_module(module_name)

    loader.__qualname__ = f"load_component({', '.join(module_names)})"
    return loader
