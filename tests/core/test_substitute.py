"""Tests for {{placeholder}} substitution."""

from mdvars.core.substitute import find_placeholders, substitute_variables


class TestSubstituteVariables:
    def test_basic(self):
        assert substitute_variables("# {{title}}", {"title": "Hello"}) == "# Hello"

    def test_whitespace_inside_braces(self):
        text = "{{ title }} {{title  }} {{\ttitle}}"
        assert substitute_variables(text, {"title": "T"}) == "T T T"

    def test_all_occurrences(self):
        assert substitute_variables("{{a}}-{{a}}-{{a}}", {"a": "x"}) == "x-x-x"

    def test_dotted_keys(self):
        assert substitute_variables("by {{author.name}}", {"author.name": "Ada"}) == "by Ada"

    def test_unknown_placeholder_left_verbatim(self):
        assert substitute_variables("{{nope}} and {{ nope }}", {"title": "x"}) == "{{nope}} and {{ nope }}"

    def test_prefix_keys_do_not_collide(self):
        variables = {"date": "D", "date_short": "DS"}
        assert substitute_variables("{{date}} {{date_short}}", variables) == "D DS"

    def test_regex_metacharacters_in_key(self):
        variables = {"a+b": "sum", "a.*": "star"}
        assert substitute_variables("{{a+b}} {{a.*}} {{ab}}", variables) == "sum star {{ab}}"

    def test_values_are_not_rescanned(self):
        variables = {"a": "{{b}}", "b": "B"}
        assert substitute_variables("{{a}}", variables) == "{{b}}"

    def test_values_with_backslashes(self):
        assert substitute_variables("{{path}}", {"path": r"C:\new\1"}) == r"C:\new\1"

    def test_single_braces_untouched(self):
        assert substitute_variables("{title} {{title}", {"title": "x"}) == "{title} {{title}"

    def test_unused_variables(self):
        assert substitute_variables("no placeholders", {"a": "b"}) == "no placeholders"


class TestFindPlaceholders:
    def test_order_and_dedup(self):
        assert find_placeholders("{{b}} {{ a }} {{b}} {{c.d}}") == ["b", "a", "c.d"]

    def test_none(self):
        assert find_placeholders("plain") == []
