"""
Snippet renderer: configuration -> copyable component source.

The renderer is a deterministic formatter. It never derives a value of its
own; every literal it prints comes from the PlaygroundConfiguration that
also drives the preview. parse_snippet() reads the literals back so the
round trip can be checked.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from .configuration import PlaygroundConfiguration
from .exceptions import SnippetParseError
from .icon_motion import ICON_CLASS_NAME, ICON_COMPONENTS
from .literals import to_literal_text, to_object_literal
from .parameters import IconId, ParameterSet
from .style import StyleDescriptor
from .transitions import TransitionDescriptor, transition_from_literal
from .variants import VariantDescriptor

logger = logging.getLogger(__name__)

BUTTON_CLASS_NAME = "relative px-8 py-3 font-medium select-none flex items-center gap-2 justify-center"

# Indentation of the attribute lines on <motion.button>
_ATTR_INDENT = " " * 4
_STYLE_INDENT = " " * 6

_COMPONENT_TO_ICON: Dict[str, IconId] = {name: icon for icon, name in ICON_COMPONENTS.items()}
_ICON_LINE_RE = re.compile(r"^ {6}<(\w+) className=\"[^\"]*\" />$")
_STYLE_LINE_RE = re.compile(r"^ {6}(\w+): (\".*\"),?$")


def render_snippet(configuration: PlaygroundConfiguration) -> str:
    """
    Render the configuration as a motion component snippet.

    Args:
        configuration: Configuration shared with the preview renderer

    Returns:
        str: Snippet text with no leading or trailing whitespace
    """
    variant = configuration.variant
    css = configuration.style.to_css()
    interaction = configuration.interaction
    icon_motion = configuration.icon_motion

    style_lines = [f"{_STYLE_INDENT}{prop}: {to_literal_text(value)}" for prop, value in css.items()]
    style_block = ",\n".join(style_lines)

    lines = [
        f"<motion.div whileHover={{{to_object_literal(interaction.while_hover())}}} "
        f"whileTap={{{to_object_literal(interaction.while_tap())}}}>",
        "  <motion.button",
        f"{_ATTR_INDENT}initial={{{to_literal_text(variant.initial)}}}",
        f"{_ATTR_INDENT}animate={{{to_literal_text(variant.animate)}}}",
        f"{_ATTR_INDENT}transition={{{to_literal_text(configuration.transition.to_literal())}}}",
        f"{_ATTR_INDENT}style={{{{",
        style_block,
        f"{_ATTR_INDENT}}}}}",
        f'{_ATTR_INDENT}className="{BUTTON_CLASS_NAME}"',
        "  >",
        f"{_ATTR_INDENT}<motion.div",
        f"{_STYLE_INDENT}animate={{{to_object_literal(icon_motion.animate())}}}",
        f"{_STYLE_INDENT}transition={{{to_object_literal(icon_motion.transition())}}}",
        f"{_ATTR_INDENT}>",
        f'{_STYLE_INDENT}<{ICON_COMPONENTS[configuration.icon_id]} className="{ICON_CLASS_NAME}" />',
        f"{_ATTR_INDENT}</motion.div>",
        "\n".join(f"{_ATTR_INDENT}{part}" for part in configuration.button_label.split("\n")),
        "  </motion.button>",
        "</motion.div>",
    ]
    return "\n".join(lines).strip()


def render(params: ParameterSet, variant: VariantDescriptor, transition: TransitionDescriptor,
           style: StyleDescriptor) -> str:
    """Render from explicit descriptors plus the icon and label in params."""
    configuration = PlaygroundConfiguration(
        preset=params.preset,
        variant=variant,
        transition=transition,
        style=style,
        icon_id=params.icon_id,
        button_label=params.button_label,
        play_token=params.play_token,
    )
    return render_snippet(configuration)


@dataclass(frozen=True)
class ParsedSnippet:
    """Values recovered from snippet text."""

    variant: VariantDescriptor
    transition: TransitionDescriptor
    style: StyleDescriptor
    icon_id: IconId
    button_label: str


def parse_snippet(text: str) -> ParsedSnippet:
    """
    Recover the descriptors embedded in a rendered snippet.

    Raises:
        SnippetParseError: If an expected attribute or block is missing
    """
    # Only "\n" separates lines; labels may hold other line-break characters
    lines = text.split("\n")

    def attribute(name: str) -> object:
        prefix = f"{_ATTR_INDENT}{name}={{"
        for line in lines:
            if line.startswith(prefix) and line.endswith("}"):
                try:
                    return json.loads(line[len(prefix):-1])
                except json.JSONDecodeError as e:
                    raise SnippetParseError(f"Malformed {name} literal: {e}") from e
        raise SnippetParseError(f"Snippet has no {name} attribute")

    initial = attribute("initial")
    animate = attribute("animate")
    transition = transition_from_literal(attribute("transition"))

    style_start = _index_of(lines, f"{_ATTR_INDENT}style={{{{")
    style_end = _index_of(lines, f"{_ATTR_INDENT}}}}}", start=style_start)
    css: Dict[str, str] = {}
    for line in lines[style_start + 1:style_end]:
        match = _STYLE_LINE_RE.match(line)
        if not match:
            raise SnippetParseError(f"Malformed style declaration: {line!r}")
        css[match.group(1)] = json.loads(match.group(2))

    icon_id: Optional[IconId] = None
    for line in lines:
        match = _ICON_LINE_RE.match(line)
        if match:
            component = match.group(1)
            if component not in _COMPONENT_TO_ICON:
                raise SnippetParseError(f"Unknown icon component: {component}")
            icon_id = _COMPONENT_TO_ICON[component]
            break
    if icon_id is None:
        raise SnippetParseError("Snippet has no icon component")

    label_start = _index_of(lines, f"{_ATTR_INDENT}</motion.div>")
    label_end = _index_of(lines, "  </motion.button>", start=label_start)
    label_lines: List[str] = [line[len(_ATTR_INDENT):] for line in lines[label_start + 1:label_end]]

    return ParsedSnippet(
        variant=VariantDescriptor.from_keyframes(initial, animate),
        transition=transition,
        style=StyleDescriptor.from_css(css),
        icon_id=icon_id,
        button_label="\n".join(label_lines),
    )


def _index_of(lines: List[str], target: str, start: int = 0) -> int:
    for i in range(start, len(lines)):
        if lines[i] == target:
            return i
    raise SnippetParseError(f"Snippet is missing line {target!r}")
