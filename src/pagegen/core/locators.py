"""
Locator placeholder extraction.

Locator patterns may contain typed placeholders that become parameters of
the generated accessor and tester methods::

    cssSelector "#item-s%id%-i%idx%"

yields ``String id`` and ``int idx`` parameters and the Java expression
``"#item-" + id + "-" + idx + ""``.
"""

import re

from .ir import LocatorArgKind, LocatorArgument, LocatorTemplate

PLACEHOLDER_RE = re.compile(r"[si]%[^ %]+%")


def _splice(arg: LocatorArgument) -> str:
    return f'" + {arg.name} + "'


def extract_locator(pattern: str) -> LocatorTemplate:
    """
    Find ``s%name%`` / ``i%name%`` placeholders in a locator pattern.

    Duplicate placeholder names are kept as separate arguments.

    Args:
        pattern: Locator text as written in the DSL

    Returns:
        LocatorTemplate with arguments in left-to-right order
    """
    args: list[LocatorArgument] = []
    parts: list[str] = []
    last = 0
    for match in PLACEHOLDER_RE.finditer(pattern):
        text = match.group()
        kind = LocatorArgKind.STRING if text.startswith("s") else LocatorArgKind.INT
        arg = LocatorArgument(name=text[2:-1], kind=kind)
        args.append(arg)
        parts.append(pattern[last : match.start()])
        parts.append(_splice(arg))
        last = match.end()
    parts.append(pattern[last:])
    return LocatorTemplate(pattern=pattern, template="".join(parts), args=args)
