"""Resolves request/interface definitions into flattened properties.

Properties inherited transitively from parent definitions are merged into
the definition's own ones. Nothing is cached: every call walks the
inheritance graph again.
"""

import logging

from rest_spec_validator.model.base import FlattenedProperties, Interface, Model, Request
from rest_spec_validator.validator.errors import CyclicInheritance, DefinitionNotFound

logger = logging.getLogger(__name__)


class PropertyResolver:
    """Looks up definitions by name and flattens their inheritance chain."""

    def __init__(self, model: Model):
        self.model = model

    def get_definition(self, name: str) -> Request | Interface:
        """Find the request or interface with exactly this name."""
        for type_ in self.model.types:
            if isinstance(type_, (Request, Interface)) and type_.name.name == name:
                return type_
        raise DefinitionNotFound(name)

    def resolve(self, name: str) -> FlattenedProperties:
        """Flatten the named definition and everything it inherits from."""
        return self._resolve(self.get_definition(name), [])

    def _resolve(self, definition: Request | Interface, chain: list[str]) -> FlattenedProperties:
        name = definition.name.name
        if name in chain:
            raise CyclicInheritance(chain + [name])
        chain = chain + [name]

        props = definition.declared_properties()
        for inherit in definition.inherits:
            parent = self._resolve(self.get_definition(inherit.type.name), chain)
            props.merge(parent)
            # The last ancestor's body state wins, it is not unioned.
            if props.body != parent.body:
                props.body = parent.body

        logger.debug(
            "Resolved %s: path=%s query=%s body=%s",
            name, props.path, props.query, props.body.name,
        )
        return props
