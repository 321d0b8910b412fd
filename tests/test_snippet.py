"""Tests for the snippet renderer and its parser."""

import pytest

from motion_playground.core import (
    Category,
    IconId,
    PRESETS_BY_CATEGORY,
    ParameterSet,
    SnippetParseError,
    build_configuration,
    parse_snippet,
    render,
    render_snippet,
)

DEFAULT_SNIPPET = """\
<motion.div whileHover={{ scale: 1.05 }} whileTap={{ scale: 0.97 }}>
  <motion.button
    initial={{"opacity":0}}
    animate={{"opacity":1}}
    transition={{"type":"tween","duration":0.8,"delay":0,"ease":[0.42,0,0.58,1],"repeat":0,"repeatType":"loop"}}
    style={{
      backgroundColor: "#EFFF4F",
      color: "#000",
      borderRadius: "20px",
      backdropFilter: "none",
      boxShadow: "0 4px 10px rgba(0,0,0,0.2)",
      fontSize: "16px",
      border: "none",
      transition: "all 0.3s ease"
    }}
    className="relative px-8 py-3 font-medium select-none flex items-center gap-2 justify-center"
  >
    <motion.div
      animate={{ rotate: [0, -20, 20, -15, 15, -10, 10, -5, 5, 0] }}
      transition={{ duration: 1.5, ease: "easeInOut", repeat: 0 }}
    >
      <Bell className="w-5 h-5" />
    </motion.div>
    Click Me
  </motion.button>
</motion.div>"""


def _all_parameter_sets():
    for category, presets in PRESETS_BY_CATEGORY.items():
        for preset in presets:
            yield ParameterSet(category=category, preset=preset)
    yield ParameterSet(glass_mode=True, background_color="#112233", easing="anticipate")
    yield ParameterSet(repeat_count=3, repeat_mode="reverse", delay=1.5, icon_id="zap")


def test_default_snippet():
    assert render_snippet(build_configuration(ParameterSet())) == DEFAULT_SNIPPET


def test_render_matches_render_snippet():
    params = ParameterSet(category=Category.PHYSICS)
    configuration = build_configuration(params)
    text = render(params, configuration.variant, configuration.transition, configuration.style)
    assert text == render_snippet(configuration)


def test_round_trip_reconstructs_descriptors():
    """Parsing the rendered text gives back the descriptors that produced it."""
    for params in _all_parameter_sets():
        configuration = build_configuration(params)
        parsed = parse_snippet(render_snippet(configuration))
        assert parsed.variant == configuration.variant
        assert parsed.transition == configuration.transition
        assert parsed.style == configuration.style
        assert parsed.icon_id is configuration.icon_id
        assert parsed.button_label == configuration.button_label


def test_spring_snippet_has_no_ease():
    text = render_snippet(build_configuration(ParameterSet(category="physics", preset="spring")))
    transition_line = next(line for line in text.splitlines() if line.startswith("    transition="))
    assert transition_line == '    transition={{"type":"spring","stiffness":120,"delay":0,"duration":0.8}}'


def test_stagger_snippet_has_empty_variants():
    text = render_snippet(build_configuration(ParameterSet(category="advanced")))
    assert "    initial={{}}" in text
    assert "    animate={{}}" in text


@pytest.mark.parametrize("label", [
    "", "Go!", "  padded  ", "two\nlines", 'say "hi"', "a\rb", "x\x0cy", "a\u2028b", "tab\there",
])
def test_label_round_trip(label):
    text = render_snippet(build_configuration(ParameterSet(button_label=label)))
    assert parse_snippet(text).button_label == label


def test_icon_component_names():
    text = render_snippet(build_configuration(ParameterSet(icon_id=IconId.CAMERA)))
    assert '      <Camera className="w-5 h-5" />' in text


def test_snippet_is_stripped():
    text = render_snippet(build_configuration(ParameterSet()))
    assert text == text.strip()


def test_parse_rejects_foreign_text():
    with pytest.raises(SnippetParseError):
        parse_snippet("<button>Click Me</button>")


def test_tiny_shadow_alpha_round_trip():
    configuration = build_configuration(ParameterSet(shadow_alpha=0.00001))
    text = render_snippet(configuration)
    assert 'boxShadow: "0 4px 10px rgba(0,0,0,0.00001)"' in text
    assert parse_snippet(text).style == configuration.style
