"""
Listener descriptor table

Closed catalog of the event-adapter interfaces a widget can be wired to.
Each entry is plain data; the emitter looks entries up, it never subclasses them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

VIEW = 'android.view.View'
ADAPTER_VIEW = 'android.widget.AdapterView'
ADAPTER_VIEW_WILDCARD = 'android.widget.AdapterView<?>'


@dataclass(frozen=True)
class ListenerDescriptor:
    """Static description of one listener interface"""
    type: str                   # Adapter interface to instantiate
    setter: str                 # Method on the target that installs the adapter
    method: str                 # Callback method name
    parameters: tuple[str, ...] = ()
    return_type: str = 'void'
    target_type: str = VIEW     # Type the setter is declared on
    generic_arguments: int = 0  # Arity of target_type, filled with wildcards

    @property
    def returns_value(self) -> bool:
        return self.return_type != 'void'


class Listener(Enum):
    """All supported listener kinds, keyed by annotation name"""

    OnClick = ListenerDescriptor(
        type='android.view.View.OnClickListener',
        setter='setOnClickListener',
        method='onClick',
        parameters=(VIEW,),
    )
    OnLongClick = ListenerDescriptor(
        type='android.view.View.OnLongClickListener',
        setter='setOnLongClickListener',
        method='onLongClick',
        parameters=(VIEW,),
        return_type='boolean',
    )
    OnItemClick = ListenerDescriptor(
        type='android.widget.AdapterView.OnItemClickListener',
        setter='setOnItemClickListener',
        method='onItemClick',
        parameters=(ADAPTER_VIEW_WILDCARD, VIEW, 'int', 'long'),
        target_type=ADAPTER_VIEW,
        generic_arguments=1,
    )
    OnItemLongClick = ListenerDescriptor(
        type='android.widget.AdapterView.OnItemLongClickListener',
        setter='setOnItemLongClickListener',
        method='onItemLongClick',
        parameters=(ADAPTER_VIEW_WILDCARD, VIEW, 'int', 'long'),
        return_type='boolean',
        target_type=ADAPTER_VIEW,
        generic_arguments=1,
    )
    OnCheckedChanged = ListenerDescriptor(
        type='android.widget.CompoundButton.OnCheckedChangeListener',
        setter='setOnCheckedChangeListener',
        method='onCheckedChanged',
        parameters=('android.widget.CompoundButton', 'boolean'),
        target_type='android.widget.CompoundButton',
    )
    OnEditorAction = ListenerDescriptor(
        type='android.widget.TextView.OnEditorActionListener',
        setter='setOnEditorActionListener',
        method='onEditorAction',
        parameters=('android.widget.TextView', 'int', 'android.view.KeyEvent'),
        return_type='boolean',
        target_type='android.widget.TextView',
    )
    OnFocusChange = ListenerDescriptor(
        type='android.view.View.OnFocusChangeListener',
        setter='setOnFocusChangeListener',
        method='onFocusChange',
        parameters=(VIEW, 'boolean'),
    )
    OnTouch = ListenerDescriptor(
        type='android.view.View.OnTouchListener',
        setter='setOnTouchListener',
        method='onTouch',
        parameters=(VIEW, 'android.view.MotionEvent'),
        return_type='boolean',
    )

    @property
    def descriptor(self) -> ListenerDescriptor:
        return self.value

    @classmethod
    def lookup(cls, name: str) -> Optional['Listener']:
        """Find a listener by annotation name, with or without a leading '@'"""
        return cls.__members__.get(name.lstrip('@'))
