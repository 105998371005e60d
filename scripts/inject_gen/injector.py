"""
Injector model module

Collects bindings for one target type and freezes them into the read-only
model handed to the emitter.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from .errors import BindingError
from .listeners import Listener
from .model import (
    Binding, FieldBinding, MethodBinding, Parameter,
    CollectionBinding, CollectionKind,
)


class WidgetBindingGroup:
    """Every binding that targets one widget identifier"""

    def __init__(self, id: int):
        self.id = id
        self._fields: list[FieldBinding] = []
        self._methods: dict[Listener, MethodBinding] = {}

    def add_field(self, binding: FieldBinding):
        if binding not in self._fields:
            self._fields.append(binding)

    def has_method(self, listener: Listener) -> bool:
        return listener in self._methods

    def add_method(self, listener: Listener, binding: MethodBinding) -> bool:
        """Add a method binding; returns False if this listener is already bound"""
        if self.has_method(listener):
            return False
        self._methods[listener] = binding
        return True

    def field_bindings(self) -> list[FieldBinding]:
        return list(self._fields)

    def method_bindings(self) -> dict[Listener, MethodBinding]:
        return dict(self._methods)

    def required_bindings(self) -> list[Binding]:
        """Required bindings, fields first, in insertion order"""
        required: list[Binding] = [f for f in self._fields if f.required]
        required.extend(m for m in self._methods.values() if m.required)
        return required

    def freeze(self) -> 'WidgetBindings':
        return WidgetBindings(
            id=self.id,
            fields=tuple(self._fields),
            methods=tuple(self._methods.items()),
        )


@dataclass(frozen=True)
class WidgetBindings:
    """Read-only view of a WidgetBindingGroup"""
    id: int
    fields: tuple[FieldBinding, ...] = ()
    methods: tuple[tuple[Listener, MethodBinding], ...] = ()

    @property
    def required_bindings(self) -> tuple[Binding, ...]:
        required: list[Binding] = [f for f in self.fields if f.required]
        required.extend(m for _, m in self.methods if m.required)
        return tuple(required)

    @property
    def is_optional(self) -> bool:
        """True when nothing requires the widget to be present"""
        return not self.required_bindings


@dataclass(frozen=True)
class InjectorModel:
    """Complete, ordered set of bindings for one target type"""
    package: str
    class_name: str
    target: str
    widgets: tuple[WidgetBindings, ...] = ()
    collections: tuple[tuple[CollectionBinding, tuple[int, ...]], ...] = ()
    parent: Optional[str] = None
    _index: dict[int, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, '_index', {w.id: i for i, w in enumerate(self.widgets)})

    @property
    def fqcn(self) -> str:
        """Fully qualified name of the generated class"""
        if not self.package:
            return self.class_name
        return f'{self.package}.{self.class_name}'

    def widget(self, id: int) -> Optional[WidgetBindings]:
        """Get the bindings for an identifier, if any"""
        index = self._index.get(id)
        return self.widgets[index] if index is not None else None

    def widget_ids(self) -> list[int]:
        return [w.id for w in self.widgets]

    def render(self) -> str:
        """Render the generated Java source"""
        from .emitter import InjectorEmitter
        return InjectorEmitter(self).render()


class InjectorBuilder:
    """Mutable population side of an injector model

    The front end calls add_field / add_method / add_collection in any order,
    then build() takes an immutable snapshot for rendering. Later additions
    never leak into an earlier snapshot.
    """

    def __init__(self, package: str, class_name: str, target: str):
        self.package = package
        self.class_name = class_name
        self.target = target
        self.parent: Optional[str] = None
        self._groups: dict[int, WidgetBindingGroup] = {}
        self._collections: list[tuple[CollectionBinding, tuple[int, ...]]] = []

    def _group(self, id: int) -> WidgetBindingGroup:
        group = self._groups.get(id)
        if group is None:
            group = WidgetBindingGroup(id)
            self._groups[id] = group
        return group

    def add_field(self, id: int, name: str, type: str, required: bool = True):
        self._group(id).add_field(FieldBinding(name, type, required))

    def add_method(self, id: int, listener: Listener, name: str,
                   parameters: Sequence[Parameter] = (), required: bool = True) -> bool:
        """Bind a method to a listener on a widget; False means a duplicate"""
        parameters = tuple(parameters)
        arity = len(listener.descriptor.parameters)
        for param in parameters:
            if not 0 <= param.listener_position < arity:
                raise BindingError(
                    f"{self.target}: parameter position {param.listener_position} of method '{name}' "
                    f"is out of range for @{listener.name} ({arity} parameters)")
        return self._group(id).add_method(listener, MethodBinding(name, parameters, required))

    def add_collection(self, ids: Iterable[int], name: str, type: str,
                       kind: CollectionKind) -> CollectionBinding:
        binding = CollectionBinding(name, type, kind)
        self._collections.append((binding, tuple(ids)))
        return binding

    def set_parent(self, parent: Optional[str]):
        """Record the generated class of the nearest injected superclass"""
        self.parent = parent

    def build(self) -> InjectorModel:
        return InjectorModel(
            package=self.package,
            class_name=self.class_name,
            target=self.target,
            widgets=tuple(g.freeze() for g in self._groups.values()),
            collections=tuple(self._collections),
            parent=self.parent,
        )
