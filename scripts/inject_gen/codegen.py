"""
Code generation utilities

Provides the line writer and the small text helpers used to emit the Java
source of generated injectors. Output is indented two spaces per level.
"""

from typing import Iterable, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .model import Binding


class CodeGen:
    """Code generation helper with indentation support"""

    def __init__(self, indent_str: str = '  '):
        self._lines: list[str] = []
        self._indent: int = 0
        self._indent_str: str = indent_str

    def line(self, text: str = ''):
        """Add a line with current indentation"""
        if text:
            self._lines.append(self._indent_str * self._indent + text)
        else:
            self._lines.append('')

    def indent(self, levels: int = 1):
        """Increase indentation"""
        self._indent += levels

    def dedent(self, levels: int = 1):
        """Decrease indentation"""
        self._indent = max(0, self._indent - levels)

    def block(self, header: str, footer: str = '}'):
        """Context manager for code blocks"""
        return _BlockContext(self, header, footer)

    def output(self) -> str:
        """Get generated code as string, terminated by a newline"""
        return '\n'.join(self._lines) + '\n'


class _BlockContext:
    """Context manager for indented code blocks"""

    def __init__(self, gen: CodeGen, header: str, footer: str):
        self._gen = gen
        self._header = header
        self._footer = footer

    def __enter__(self):
        self._gen.line(self._header)
        self._gen.indent()
        return self

    def __exit__(self, *args):
        self._gen.dedent()
        self._gen.line(self._footer)


def cast_if_needed(source_type: str, destination_type: str) -> str:
    """Return a cast prefix when the two type strings differ

    The comparison is plain string inequality:
        ("android.view.View", "android.view.View") -> ""
        ("android.view.View", "android.widget.TextView") -> "(android.widget.TextView) "
    """
    if source_type != destination_type:
        return f'({destination_type}) '
    return ''


def wildcard_generics(arity: int) -> str:
    """Wildcard type arguments for a raw generic type

    Examples:
        0 -> ""
        1 -> "<?>"
        2 -> "<?, ?>"
    """
    if arity <= 0:
        return ''
    return '<' + ', '.join('?' for _ in range(arity)) + '>'


def human_description(bindings: Sequence['Binding']) -> str:
    """Join binding descriptions into a readable list

    Examples:
        [a] -> "a"
        [a, b] -> "a and b"
        [a, b, c] -> "a, b, and c"
    """
    descriptions = [b.description for b in bindings]
    if len(descriptions) == 1:
        return descriptions[0]
    if len(descriptions) == 2:
        return f'{descriptions[0]} and {descriptions[1]}'
    parts = []
    for i, description in enumerate(descriptions):
        if i == len(descriptions) - 1:
            description = 'and ' + description
        parts.append(description)
    return ', '.join(parts)


def java_string(text: str) -> str:
    """Quote text as a Java string literal"""
    escaped = (text.replace('\\', '\\\\')
                   .replace('"', '\\"')
                   .replace('\n', '\\n')
                   .replace('\r', '\\r')
                   .replace('\t', '\\t'))
    return f'"{escaped}"'


def join_args(args: Iterable[str]) -> str:
    """Join call arguments with a comma and a space"""
    return ', '.join(args)


def package_path(package: str) -> str:
    """Convert a dotted package name to a relative directory path

    Examples:
        com.example.app -> com/example/app
        "" -> ""
    """
    return '/'.join(part for part in package.split('.') if part)
