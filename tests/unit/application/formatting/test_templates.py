# tests/unit/application/formatting/test_templates.py

"""Tests for template span protection"""

# Third party imports
from pytest import mark
from pytest import param

# Local imports
from json_workbench.application.formatting import TemplatePlaceholder
from json_workbench.application.formatting import extract_templates
from json_workbench.application.formatting import has_template_syntax
from json_workbench.application.formatting import restore_templates


class TestHasTemplateSyntax:
    """Test template detection"""

    @mark.parametrize(
        "text",
        [
            param('{"a": "{{ name }}"}', id="variable"),
            param("{% if x %}", id="statement"),
            param("{# note #}", id="hash-comment"),
            param("{{! note }}", id="bang-comment"),
            param("{{!-- block }} comment --}}", id="block-comment"),
        ],
    )
    def test_detected(self, text):
        """Test each recognized template form"""
        assert has_template_syntax(text) is True

    @mark.parametrize("text", ['{"a": {"b": 1}}', "{}", "{ {} }"])
    def test_plain_json(self, text):
        """Test that nested JSON braces are not templates"""
        assert has_template_syntax(text) is False


class TestExtractTemplates:
    """Test placeholder substitution"""

    def test_whole_string_template(self):
        """Test that a string holding only a template is replaced with its quotes"""
        text, placeholders = extract_templates('{"a": "{{x}}"}')
        assert text == '{"a": "__TEMPLATE_0__"}'
        assert placeholders == [TemplatePlaceholder('"__TEMPLATE_0__"', '"{{x}}"')]

    def test_template_inside_string(self):
        """Test that a template within a longer string becomes a bare token"""
        text, placeholders = extract_templates('{"a": "Hi {{ name }}!"}')
        assert text == '{"a": "Hi __TEMPLATE_0__!"}'
        assert placeholders == [TemplatePlaceholder("__TEMPLATE_0__", "{{ name }}")]

    def test_template_outside_string(self):
        """Test that a bare template becomes a quoted token"""
        text, placeholders = extract_templates('{"items": {% for x in xs %}}')
        assert text == '{"items": "__TEMPLATE_0__"}'
        assert placeholders == [TemplatePlaceholder('"__TEMPLATE_0__"', "{% for x in xs %}")]

    def test_escaped_quote_does_not_end_string(self):
        """Test that escapes are honored while tracking strings"""
        text, placeholders = extract_templates('["a\\"{{x}}"]')
        assert text == '["a\\"__TEMPLATE_0__"]'
        assert placeholders[0].placeholder == "__TEMPLATE_0__"

    def test_discovery_order(self):
        """Test that tokens are numbered in the order they appear"""
        _, placeholders = extract_templates('["{{a}}", "{{b}}"]')
        assert [p.original for p in placeholders] == ['"{{a}}"', '"{{b}}"']
        assert [p.placeholder for p in placeholders] == ['"__TEMPLATE_0__"', '"__TEMPLATE_1__"']

    def test_no_templates(self):
        """Test that plain JSON passes through"""
        assert extract_templates('{"a": 1}') == ('{"a": 1}', [])


class TestRestoreTemplates:
    """Test placeholder restoration"""

    def test_round_trip(self):
        """Test that restoring the extraction gives back the original text"""
        original = '{"a": "{{x}}", "b": "Hi {{ y }}", "c": {% z %}}'
        text, placeholders = extract_templates(original)
        assert restore_templates(text, placeholders) == original

    def test_many_tokens(self):
        """Test that token 1 is not confused with token 10"""
        original = "[" + ", ".join(f'"{{{{v{i}}}}}"' for i in range(12)) + "]"
        text, placeholders = extract_templates(original)
        assert len(placeholders) == 12
        assert restore_templates(text, placeholders) == original
