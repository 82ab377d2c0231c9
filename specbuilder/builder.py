"""
Spec builders.

SpecBuilder wraps an abstract spec (raw f.yml data or an AbstractSpec) and
exposes its sections; the Function Compute builders render it into one of the
two output variants via to_json().
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from .core.assembler import DEFAULT_ACCESS, assemble
from .core.utils import remove_empty_attributes
from .exceptions import SpecFormatError, UnknownVariantError
from .models.resolved import ResolvedService
from .models.spec import AbstractSpec, FunctionSpec, ProviderSpec, ServiceSpec
from .serializers.component import render_projects
from .serializers.ros import render_template

logger = logging.getLogger(__name__)

SpecInput = Union[AbstractSpec, Mapping[str, Any]]


class SpecBuilder:
    """Base builder: holds the abstract spec and the user-defined env."""

    def __init__(
        self,
        origin_data: SpecInput,
        user_env: Optional[Mapping[str, Any]] = None,
        default_access: str = DEFAULT_ACCESS,
    ):
        if isinstance(origin_data, AbstractSpec):
            self.spec = origin_data
        elif origin_data is None or isinstance(origin_data, Mapping):
            # Badly typed values fall back to defaults instead of failing.
            self.spec = AbstractSpec.model_validate(dict(origin_data or {}))
        else:
            raise SpecFormatError(
                "input", TypeError(f"expected a mapping, got {type(origin_data).__name__}")
            )
        self.user_env = dict(user_env or {})
        self.default_access = default_access

    def get_provider(self) -> ProviderSpec:
        return self.spec.provider

    def get_service(self) -> ServiceSpec:
        return self.spec.service

    def get_functions(self) -> Dict[str, FunctionSpec]:
        return self.spec.functions

    def resolve(self) -> ResolvedService:
        """Run one assembly pass."""
        return assemble(self.spec, self.user_env, default_access=self.default_access)

    def to_json(self) -> Any:
        return self.spec.model_dump(by_alias=True, exclude_none=True)


class FCSpecBuilder(SpecBuilder):
    """Builds the declarative ROS template."""

    def to_json(self) -> Dict[str, Any]:
        return remove_empty_attributes(render_template(self.resolve()))


class FCComponentSpecBuilder(SpecBuilder):
    """Builds the component project list, one descriptor per function."""

    def to_json(self) -> List[Dict[str, Any]]:
        return remove_empty_attributes(render_projects(self.resolve()))


BUILDERS = {
    "ros": FCSpecBuilder,
    "component": FCComponentSpecBuilder,
}


def build_template(
    origin_data: SpecInput,
    variant: str = "ros",
    user_env: Optional[Mapping[str, Any]] = None,
    default_access: str = DEFAULT_ACCESS,
) -> Any:
    """
    Build the output for the named variant (`ros` or `component`).

    default_access is used when the provider section names no access alias.
    """
    builder_cls = BUILDERS.get(variant)
    if builder_cls is None:
        raise UnknownVariantError(variant)

    logger.debug(f"Building {variant} output with {builder_cls.__name__}")
    return builder_cls(origin_data, user_env, default_access=default_access).to_json()
