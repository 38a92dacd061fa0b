"""FastAPI dependency injection for grid services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from glazing.application.commands import GenerateGridCommand
from glazing.application.factory import ServiceFactory, get_factory


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance."""
    return get_factory()


def get_generate_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> GenerateGridCommand:
    """Dependency for GenerateGridCommand."""
    return factory.create_generate_command()


ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
GenerateCommandDep = Annotated[GenerateGridCommand, Depends(get_generate_command)]
