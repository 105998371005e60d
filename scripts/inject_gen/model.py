"""
Binding model module

Value objects describing what an injector assigns, wires and populates.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class Binding(Protocol):
    """Anything that can depend on a widget being present"""

    @property
    def description(self) -> str: ...

    @property
    def required(self) -> bool: ...


@dataclass(frozen=True)
class FieldBinding:
    """Assign the found widget to a field"""
    name: str
    type: str
    required: bool = True

    @property
    def description(self) -> str:
        return f"field '{self.name}'"


@dataclass(frozen=True)
class Parameter:
    """Method parameter fed from a listener callback argument"""
    type: str
    listener_position: int


@dataclass(frozen=True)
class MethodBinding:
    """Invoke a target method from inside a listener callback"""
    name: str
    parameters: tuple[Parameter, ...] = ()
    required: bool = True

    def __post_init__(self):
        # Callers may hand in any sequence; keep a private immutable copy.
        object.__setattr__(self, 'parameters', tuple(self.parameters))

    @property
    def description(self) -> str:
        return f"method '{self.name}'"


class CollectionKind(Enum):
    """Construction used for a collection binding"""
    ARRAY = 'ARRAY'
    LIST = 'LIST'


@dataclass(frozen=True, eq=False)
class CollectionBinding:
    """Assign a fixed-size collection of widgets to a field

    Compared and hashed by identity: two bindings with the same name and
    type are still distinct entries.
    """
    name: str
    type: str
    kind: CollectionKind

    @property
    def description(self) -> str:
        return self.name
