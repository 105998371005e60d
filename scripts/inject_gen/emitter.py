"""
Injector emission module

Renders an InjectorModel into the Java source of its generated injector:
an inject() routine that looks up, assigns and wires widgets, and a reset()
routine that clears every assigned field.
"""

from typing import TYPE_CHECKING

from .codegen import (
    CodeGen, cast_if_needed, human_description, java_string,
    join_args, wildcard_generics,
)
from .errors import InternalConsistencyError
from .model import CollectionKind

if TYPE_CHECKING:
    from .injector import InjectorModel, WidgetBindings
    from .listeners import Listener
    from .model import CollectionBinding, MethodBinding

VIEW_TYPE = 'android.view.View'
FINDER_TYPE = 'butterknife.ButterKnife.Finder'
HEADER_COMMENT = '// Generated code from Butter Knife. Do not modify!'
INDENT = '  '

# Output templates; named slots are filled with str.format
PACKAGE_TEMPLATE = 'package {package};'
IMPORT_TEMPLATE = 'import {type};'
CLASS_TEMPLATE = 'public class {class_name} {{'
INJECT_TEMPLATE = 'public static void inject(Finder finder, final {target} target, Object source) {{'
RESET_TEMPLATE = 'public static void reset({target} target) {{'
PARENT_INJECT_TEMPLATE = '{parent}.inject(finder, target, source);'
PARENT_RESET_TEMPLATE = '{parent}.reset(target);'
FIND_REQUIRED_TEMPLATE = 'finder.findRequiredView(source, {id}, {description})'
FIND_OPTIONAL_TEMPLATE = 'finder.findOptionalView(source, {id})'
ASSIGN_TEMPLATE = 'target.{name} = {value};'

# Collection kind -> runtime factory call
COLLECTION_FACTORIES = {
    CollectionKind.ARRAY: 'Finder.arrayOf',
    CollectionKind.LIST: 'Finder.listOf',
}


class InjectorEmitter:
    """Generates the injector source for one model"""

    def __init__(self, model: 'InjectorModel'):
        self.model = model

    def render(self) -> str:
        """Render the complete compilation unit"""
        gen = CodeGen(INDENT)
        self._gen_header(gen)
        with gen.block(CLASS_TEMPLATE.format(class_name=self.model.class_name)):
            self._gen_inject(gen)
            gen.line()
            self._gen_reset(gen)
        return gen.output()

    def _gen_header(self, gen: CodeGen):
        gen.line(HEADER_COMMENT)
        if self.model.package:
            gen.line(PACKAGE_TEMPLATE.format(package=self.model.package))
            gen.line()
        gen.line(IMPORT_TEMPLATE.format(type=VIEW_TYPE))
        gen.line(IMPORT_TEMPLATE.format(type=FINDER_TYPE))
        gen.line()

    # ------------------------------------------------------------------
    # inject()
    # ------------------------------------------------------------------

    def _gen_inject(self, gen: CodeGen):
        with gen.block(INJECT_TEMPLATE.format(target=self.model.target)):
            if self.model.parent:
                gen.line(PARENT_INJECT_TEMPLATE.format(parent=self.model.parent))
                gen.line()

            # Shared temporary for every lookup
            gen.line('View view;')

            for widget in self.model.widgets:
                self._gen_widget(widget, gen)

            for binding, ids in self.model.collections:
                self._gen_collection(binding, ids, gen)

    def _gen_widget(self, widget: 'WidgetBindings', gen: CodeGen):
        required = widget.required_bindings
        if required:
            description = java_string(human_description(required))
            lookup = FIND_REQUIRED_TEMPLATE.format(id=widget.id, description=description)
        else:
            lookup = FIND_OPTIONAL_TEMPLATE.format(id=widget.id)
        gen.line(f'view = {lookup};')

        for binding in widget.fields:
            value = cast_if_needed(VIEW_TYPE, binding.type) + 'view'
            gen.line(ASSIGN_TEMPLATE.format(name=binding.name, value=value))

        if not widget.methods:
            return

        # A required lookup already failed if the view was missing
        if widget.is_optional:
            with gen.block('if (view != null) {'):
                for listener, binding in widget.methods:
                    self._gen_listener(listener, binding, gen)
        else:
            for listener, binding in widget.methods:
                self._gen_listener(listener, binding, gen)

    def _gen_listener(self, listener: 'Listener', binding: 'MethodBinding', gen: CodeGen):
        """Install an anonymous adapter that forwards to the bound method"""
        desc = listener.descriptor

        # ((TARGET_TYPE<?>) view).setter(
        if desc.target_type != VIEW_TYPE:
            cast = desc.target_type + wildcard_generics(desc.generic_arguments)
            receiver = f'(({cast}) view)'
        else:
            receiver = 'view'
        gen.line(f'{receiver}.{desc.setter}(')
        gen.indent()

        with gen.block(f'new {desc.type}() {{', '});'):
            gen.line(f'@Override public {desc.return_type} {desc.method}(')
            gen.indent()
            count = len(desc.parameters)
            for i, param_type in enumerate(desc.parameters):
                separator = ',' if i < count - 1 else ''
                gen.line(f'{param_type} p{i}{separator}')
            gen.dedent()

            with gen.block(') {'):
                args = []
                for param in binding.parameters:
                    position = param.listener_position
                    if not 0 <= position < count:
                        raise InternalConsistencyError(
                            f"Parameter position {position} of method '{binding.name}' "
                            f"is out of range for {desc.method}() ({count} parameters)")
                    source_type = desc.parameters[position]
                    args.append(cast_if_needed(source_type, param.type) + f'p{position}')
                call = f'target.{binding.name}({join_args(args)});'
                if desc.returns_value:
                    call = 'return ' + call
                gen.line(call)

        gen.dedent()

    def _gen_collection(self, binding: 'CollectionBinding', ids: tuple[int, ...], gen: CodeGen):
        factory = COLLECTION_FACTORIES.get(binding.kind)
        if factory is None:
            raise InternalConsistencyError(f'Unknown collection kind: {binding.kind!r}')

        gen.line(f'target.{binding.name} = {factory}(')
        gen.indent(2)
        description = java_string(binding.description)
        count = len(ids)
        for i, id in enumerate(ids):
            lookup = FIND_REQUIRED_TEMPLATE.format(id=id, description=description)
            separator = ',' if i < count - 1 else ''
            gen.line(cast_if_needed(VIEW_TYPE, binding.type) + lookup + separator)
        gen.dedent(2)
        gen.line(');')

    # ------------------------------------------------------------------
    # reset()
    # ------------------------------------------------------------------

    def _gen_reset(self, gen: CodeGen):
        with gen.block(RESET_TEMPLATE.format(target=self.model.target)):
            if self.model.parent:
                gen.line(PARENT_RESET_TEMPLATE.format(parent=self.model.parent))
                gen.line()
            for widget in self.model.widgets:
                for binding in widget.fields:
                    gen.line(ASSIGN_TEMPLATE.format(name=binding.name, value='null'))
            for binding, _ in self.model.collections:
                gen.line(ASSIGN_TEMPLATE.format(name=binding.name, value='null'))

