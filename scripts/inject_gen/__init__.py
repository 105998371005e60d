"""
inject_gen - view injector source generator

Builds an ordered model of field, listener and collection bindings for a
target type and renders the companion injector class that performs them at
runtime, together with the reset routine that clears them.
"""

from .model import Binding, FieldBinding, MethodBinding, Parameter, CollectionBinding, CollectionKind
from .listeners import Listener, ListenerDescriptor
from .injector import WidgetBindingGroup, WidgetBindings, InjectorBuilder, InjectorModel
from .emitter import InjectorEmitter
from .codegen import CodeGen, human_description
from .errors import InjectGenError, BindingError, InternalConsistencyError
from .generator import Generator, GeneratorConfig, GenerationReport, TargetResult

__all__ = [
    'Binding', 'FieldBinding', 'MethodBinding', 'Parameter', 'CollectionBinding', 'CollectionKind',
    'Listener', 'ListenerDescriptor',
    'WidgetBindingGroup', 'WidgetBindings', 'InjectorBuilder', 'InjectorModel',
    'InjectorEmitter',
    'CodeGen', 'human_description',
    'InjectGenError', 'BindingError', 'InternalConsistencyError',
    'Generator', 'GeneratorConfig', 'GenerationReport', 'TargetResult',
]
