"""
Binding description loader

Reads JSON binding descriptions and drives InjectorBuilder the way an
annotation-scanning front end would.
"""

import json
import logging
from typing import Any

from .errors import BindingError
from .injector import InjectorBuilder, InjectorModel
from .listeners import Listener
from .model import CollectionKind, Parameter

logger = logging.getLogger(__name__)


def read_targets(json_path: str) -> list[dict]:
    """Read the target declarations of a JSON file without building them"""
    with open(json_path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise BindingError(f'{json_path}: invalid JSON: {e}') from e
    return target_declarations(data)


def load(json_path: str) -> list[InjectorModel]:
    """Load every target described in a JSON file"""
    return build_all(read_targets(json_path))


def from_dict(data: dict) -> list[InjectorModel]:
    """Build models from a single target object or a {"targets": [...]} document"""
    return build_all(target_declarations(data))


def build_all(decls: list[dict]) -> list[InjectorModel]:
    """Build a model for each target declaration"""
    models = []
    for t in decls:
        model = parse_target(t).build()
        logger.debug('Parsed %s: %d widgets, %d collections',
                     model.target, len(model.widgets), len(model.collections))
        models.append(model)
    return models


def parse_target(decl: dict) -> InjectorBuilder:
    """Populate a builder from one target declaration"""
    if not isinstance(decl, dict):
        raise BindingError('Target declaration must be a JSON object')
    for key in ('class_name', 'target'):
        if key not in decl:
            raise BindingError(f"Target declaration is missing '{key}'")
    for key in ('package', 'class_name', 'target'):
        if key in decl and not isinstance(decl[key], str):
            raise BindingError(f"Target declaration '{key}' must be a string, got {decl[key]!r}")
    if decl.get('parent') is not None and not isinstance(decl['parent'], str):
        raise BindingError(f"Target declaration 'parent' must be a string, got {decl['parent']!r}")

    builder = InjectorBuilder(
        package=decl.get('package', ''),
        class_name=decl['class_name'],
        target=decl['target'],
    )

    try:
        for f in decl.get('fields', []):
            builder.add_field(int(f['id']), f['name'], f['type'], _required(builder, f))

        for m in decl.get('methods', []):
            _add_method(builder, m)

        for c in decl.get('collections', []):
            _add_collection(builder, c)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise BindingError(f'{builder.target}: malformed binding: {e!r}') from e

    if decl.get('parent'):
        builder.set_parent(decl['parent'])

    return builder


def _required(builder: InjectorBuilder, decl: dict[str, Any]) -> bool:
    required = decl.get('required', True)
    if not isinstance(required, bool):
        raise BindingError(
            f"{builder.target}: 'required' of '{decl.get('name')}' must be true or false, "
            f"got {required!r}")
    return required


def _add_method(builder: InjectorBuilder, decl: dict[str, Any]):
    id = int(decl['id'])
    name = decl['name']
    listener_name = decl['listener']
    listener = Listener.lookup(listener_name) if isinstance(listener_name, str) else None
    if listener is None:
        raise BindingError(f"{builder.target}: unknown listener {listener_name!r} on method '{name}'")

    parameters = [Parameter(p['type'], int(p['position'])) for p in decl.get('parameters', [])]
    if not builder.add_method(id, listener, name, parameters, _required(builder, decl)):
        raise BindingError(
            f"{builder.target}: multiple @{listener.name} methods bound to id {id} "
            f"(method '{name}')")


def _add_collection(builder: InjectorBuilder, decl: dict[str, Any]):
    ids = [int(i) for i in decl['ids']]
    if not ids:
        raise BindingError(f"{builder.target}: collection '{decl['name']}' has no ids")
    kind_name = decl.get('kind', 'ARRAY')
    if not isinstance(kind_name, str):
        raise BindingError(
            f"{builder.target}: collection '{decl['name']}' has invalid kind {kind_name!r}")
    kind = CollectionKind(kind_name.upper())
    builder.add_collection(ids, decl['name'], decl['type'], kind)


def target_declarations(data: Any) -> list[dict]:
    """Split a document into its target declarations"""
    if not isinstance(data, dict):
        raise BindingError('Binding document must be a JSON object')
    targets = data['targets'] if 'targets' in data else [data]
    if not isinstance(targets, list):
        raise BindingError('"targets" must be a list')
    return targets
