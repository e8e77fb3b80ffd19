"""
Type resolver.

Converts one classified type descriptor into one IR type, recursing into
arrays and maps. Nullability is never seen here: callers strip null and
undefined before resolving.
"""

from __future__ import annotations

from ..declarations.nodes import DescriptorKind, TypeDescriptor
from ..errors import UnsupportedTypeError
from .ir_nodes import (
    ANY,
    BOOLEAN,
    BYTE_ARRAY,
    NUMBER,
    STRING,
    IRType,
    array_of,
    enum_ref,
    map_of,
    record_ref,
)

# The only generic shape that maps to a dictionary
MAP_GENERIC_NAME = "Record"


class TypeResolver:
    """Resolves type descriptors to IR types."""

    PRIMITIVES = {
        DescriptorKind.STRING: STRING,
        DescriptorKind.NUMBER: NUMBER,
        DescriptorKind.BOOLEAN: BOOLEAN,
        DescriptorKind.ANY: ANY,
        DescriptorKind.BYTE_ARRAY: BYTE_ARRAY,
    }

    def resolve(self, descriptor: TypeDescriptor) -> IRType:
        """
        Resolve a type descriptor.

        Args:
            descriptor: The classified source type

        Returns:
            The IR type

        Raises:
            UnsupportedTypeError: If the descriptor has no IR equivalent
        """
        kind = descriptor.kind

        if kind in self.PRIMITIVES:
            return self.PRIMITIVES[kind]

        if kind == DescriptorKind.ARRAY:
            if descriptor.element is None:
                raise UnsupportedTypeError(descriptor.display_name)
            return array_of(self.resolve(descriptor.element))

        if kind == DescriptorKind.GENERIC:
            return self._resolve_generic(descriptor)

        if kind == DescriptorKind.ENUM_REFERENCE:
            return enum_ref(descriptor.display_name)

        if kind == DescriptorKind.RECORD_REFERENCE:
            return record_ref(descriptor.display_name)

        if kind == DescriptorKind.UNION and descriptor.alias_name:
            # Literal-union aliases become enums of the same name
            return enum_ref(descriptor.alias_name)

        # Inline unions, literals, inline objects, null, never, Date, ...
        raise UnsupportedTypeError(descriptor.display_name)

    def _resolve_generic(self, descriptor: TypeDescriptor) -> IRType:
        if descriptor.generic_name != MAP_GENERIC_NAME or len(descriptor.type_arguments) != 2:
            raise UnsupportedTypeError(descriptor.display_name)
        key, value = descriptor.type_arguments
        return map_of(self.resolve(key), self.resolve(value))
