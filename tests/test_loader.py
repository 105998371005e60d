import json

import pytest

from inject_gen import BindingError, CollectionKind, Listener
from inject_gen import loader

MAIN_ACTIVITY = {
    'package': 'com.example',
    'class_name': 'MainActivity$$ViewInjector',
    'target': 'com.example.MainActivity',
    'parent': 'com.example.BaseActivity$$ViewInjector',
    'fields': [
        {'id': 42, 'name': 'title', 'type': 'android.widget.TextView'},
    ],
    'methods': [
        {'id': 42, 'listener': 'OnClick', 'name': 'onTitle',
         'parameters': [{'type': 'android.widget.TextView', 'position': 0}]},
        {'id': 7, 'listener': 'OnLongClick', 'name': 'onHold', 'required': False},
    ],
    'collections': [
        {'ids': [1, 2], 'name': 'tabs', 'type': 'android.widget.Button', 'kind': 'list'},
    ],
}


def test_from_dict_single_target():
    [model] = loader.from_dict(MAIN_ACTIVITY)
    assert model.fqcn == 'com.example.MainActivity$$ViewInjector'
    assert model.parent == 'com.example.BaseActivity$$ViewInjector'
    assert model.widget_ids() == [42, 7]
    assert model.widget(42).fields[0].required
    assert not model.widget(7).methods[0][1].required
    assert model.widget(7).is_optional
    [(binding, ids)] = model.collections
    assert binding.kind is CollectionKind.LIST
    assert ids == (1, 2)


def test_from_dict_targets_list():
    other = dict(MAIN_ACTIVITY, class_name='Other$$ViewInjector', target='com.example.Other')
    models = loader.from_dict({'targets': [MAIN_ACTIVITY, other]})
    assert [m.class_name for m in models] == ['MainActivity$$ViewInjector', 'Other$$ViewInjector']


def test_load_from_file(tmp_path):
    path = tmp_path / 'bindings.json'
    path.write_text(json.dumps(MAIN_ACTIVITY))
    [model] = loader.load(str(path))
    assert model.widget(42).methods[0][0] is Listener.OnClick


def test_invalid_json(tmp_path):
    path = tmp_path / 'broken.json'
    path.write_text('{"targets": [')
    with pytest.raises(BindingError, match='invalid JSON'):
        loader.read_targets(str(path))


def test_duplicate_listener_is_reported():
    decl = dict(MAIN_ACTIVITY, methods=[
        {'id': 1, 'listener': 'OnClick', 'name': 'a'},
        {'id': 1, 'listener': 'OnClick', 'name': 'b'},
    ])
    with pytest.raises(BindingError, match=r"multiple @OnClick methods bound to id 1 \(method 'b'\)"):
        loader.from_dict(decl)


def test_unknown_listener():
    decl = dict(MAIN_ACTIVITY, methods=[{'id': 1, 'listener': 'OnSwipe', 'name': 'swiped'}])
    with pytest.raises(BindingError, match="unknown listener 'OnSwipe'"):
        loader.from_dict(decl)


def test_parameter_position_out_of_range():
    decl = dict(MAIN_ACTIVITY, methods=[
        {'id': 1, 'listener': 'OnClick', 'name': 'click',
         'parameters': [{'type': 'android.view.View', 'position': 1}]},
    ])
    with pytest.raises(BindingError, match='out of range for @OnClick'):
        loader.from_dict(decl)


def test_unknown_collection_kind():
    decl = dict(MAIN_ACTIVITY, collections=[
        {'ids': [1], 'name': 'set', 'type': 'android.view.View', 'kind': 'SET'},
    ])
    with pytest.raises(BindingError, match='malformed binding'):
        loader.from_dict(decl)


def test_empty_collection_ids():
    decl = dict(MAIN_ACTIVITY, collections=[
        {'ids': [], 'name': 'none', 'type': 'android.view.View'},
    ])
    with pytest.raises(BindingError, match="collection 'none' has no ids"):
        loader.from_dict(decl)


def test_missing_target_keys():
    with pytest.raises(BindingError, match='missing'):
        loader.from_dict({'package': 'com.example'})


def test_document_must_be_object():
    with pytest.raises(BindingError):
        loader.from_dict([MAIN_ACTIVITY])


@pytest.mark.parametrize('kind', [3, None, ['LIST']])
def test_non_string_collection_kind(kind):
    decl = dict(MAIN_ACTIVITY, collections=[
        {'ids': [1], 'name': 'tabs', 'type': 'android.view.View', 'kind': kind},
    ])
    with pytest.raises(BindingError, match="collection 'tabs' has invalid kind"):
        loader.from_dict(decl)


@pytest.mark.parametrize('listener', [1, None, {'name': 'OnClick'}])
def test_non_string_listener(listener):
    decl = dict(MAIN_ACTIVITY, methods=[{'id': 1, 'listener': listener, 'name': 'clicked'}])
    with pytest.raises(BindingError, match='unknown listener'):
        loader.from_dict(decl)


@pytest.mark.parametrize('key, value', [
    ('package', None),
    ('package', 7),
    ('class_name', None),
    ('target', ['com.example.MainActivity']),
    ('parent', 12),
])
def test_target_names_must_be_strings(key, value):
    with pytest.raises(BindingError, match=f"'{key}' must be a string"):
        loader.from_dict(dict(MAIN_ACTIVITY, **{key: value}))


@pytest.mark.parametrize('required', ['false', 0, None])
def test_field_required_must_be_bool(required):
    decl = dict(MAIN_ACTIVITY, fields=[
        {'id': 1, 'name': 'a', 'type': 'android.view.View', 'required': required},
    ])
    with pytest.raises(BindingError, match="'required' of 'a' must be true or false"):
        loader.from_dict(decl)


def test_method_required_must_be_bool():
    decl = dict(MAIN_ACTIVITY, methods=[
        {'id': 1, 'listener': 'OnClick', 'name': 'clicked', 'required': 'false'},
    ])
    with pytest.raises(BindingError, match="'required' of 'clicked'"):
        loader.from_dict(decl)


def test_required_false_gives_optional_lookup():
    decl = dict(MAIN_ACTIVITY, parent=None, methods=[], collections=[], fields=[
        {'id': 1, 'name': 'a', 'type': 'android.view.View', 'required': False},
    ])
    [model] = loader.from_dict(decl)
    assert 'view = finder.findOptionalView(source, 1);' in model.render()


def test_non_object_binding_entry():
    decl = dict(MAIN_ACTIVITY, fields=['title'])
    with pytest.raises(BindingError, match='malformed binding'):
        loader.from_dict(decl)
