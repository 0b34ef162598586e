"""
Tests for language profiles, body templates and the template engine.
"""
from dataclasses import replace

import pytest

from pg_typegen.codegen.core.profile import (
    PRIMITIVE_TYPES,
    BodyTemplate,
    ProfileError,
    validate_profile,
)
from pg_typegen.codegen.core.templates import (
    TemplateEngine,
    TemplateError,
    capitalize_first,
)
from pg_typegen.codegen.languages import BUILTIN_PROFILES, GO_PROFILE, TYPESCRIPT_PROFILE


class TestBuiltinProfiles:
    """Tests for the shipped profiles."""

    @pytest.mark.parametrize("profile", BUILTIN_PROFILES, ids=lambda p: p.name)
    def test_valid(self, profile):
        """Every built-in profile passes validation."""
        validate_profile(profile)

    def test_only_typescript_has_preamble(self):
        """TypeScript is the only built-in language needing a preamble."""
        with_preamble = [p.name for p in BUILTIN_PROFILES if p.needs_preamble]
        assert with_preamble == ["typescript"]

    def test_primitive_types(self):
        """primitive_types exposes every spelling by field name."""
        types = GO_PROFILE.primitive_types()
        assert tuple(types) == PRIMITIVE_TYPES
        assert types["binary_type"] == "[]byte"

    def test_profiles_are_immutable(self):
        """Profiles cannot be modified after construction."""
        with pytest.raises(AttributeError):
            GO_PROFILE.integer_type = "int64"


class TestValidateProfile:
    """Tests for profile completeness checks."""

    def test_missing_spelling(self):
        """A non-string spelling is rejected."""
        broken = replace(GO_PROFILE, float_type=None)
        with pytest.raises(ProfileError, match="float_type"):
            validate_profile(broken)

    def test_empty_name(self):
        """Profiles need a name."""
        with pytest.raises(ProfileError, match="name"):
            validate_profile(replace(GO_PROFILE, name=""))

    def test_body_missing_fields_slot(self):
        """A body without the fields slot is rejected."""
        broken = replace(GO_PROFILE, body=BodyTemplate("type {{ class_name }} struct {}"))
        with pytest.raises(ProfileError, match="fields"):
            validate_profile(broken)

    def test_body_missing_name_slot(self):
        """A body without the class name slot is rejected."""
        broken = replace(GO_PROFILE, body=BodyTemplate("struct {\n{{ fields }}\n}"))
        with pytest.raises(ProfileError, match="class_name"):
            validate_profile(broken)

    def test_body_unknown_slot(self):
        """Slots other than class_name, fields and indent are rejected."""
        broken = replace(
            GO_PROFILE,
            body=BodyTemplate("{{ package }}\ntype {{ class_name }} {\n{{ fields }}\n}"),
        )
        with pytest.raises(ProfileError, match="package"):
            validate_profile(broken)

    def test_body_must_be_template(self):
        """A plain string body is rejected."""
        broken = replace(GO_PROFILE, body="type {{ class_name }} {{ fields }}")
        with pytest.raises(ProfileError, match="BodyTemplate"):
            validate_profile(broken)

    def test_comment_needs_text_slot(self):
        """Comment templates must use the text slot."""
        broken = replace(GO_PROFILE, comment="// note")
        with pytest.raises(ProfileError, match="text"):
            validate_profile(broken)

    def test_invalid_template_syntax(self):
        """Unparseable templates surface as ProfileError."""
        broken = replace(GO_PROFILE, comment="//{{ text ")
        with pytest.raises(ProfileError, match="invalid template"):
            validate_profile(broken)


class TestBodyTemplate:
    """Tests for slot filling."""

    def test_slot_values_not_reinterpreted(self):
        """Values containing slot syntax are inserted verbatim."""
        body = BodyTemplate("type {{ class_name }} {\n{{ fields | indent(indent) }}\n}")
        rendered = body.render(class_name="{{ fields }}", fields="a: {{ class_name }}")
        assert rendered == "type {{ fields }} {\n    a: {{ class_name }}\n}"

    def test_custom_indent(self):
        """The indent unit is passed through to the template."""
        body = TYPESCRIPT_PROFILE.body
        rendered = body.render(class_name="T", fields="a: string", indent="\t")
        assert rendered == "type T = {\n\ta: string\n}"

    def test_generics_not_escaped(self):
        """Angle brackets survive rendering."""
        body = BodyTemplate("class {{ class_name }} {\n{{ fields }}\n}")
        rendered = body.render(class_name="A", fields="items: List<dynamic>")
        assert "List<dynamic>" in rendered
        assert "&lt;" not in rendered

    def test_render_comment(self):
        """Comments render through the profile's comment template."""
        assert GO_PROFILE.render_comment(" hello") == "// hello"


class TestTemplateEngine:
    """Tests for the Jinja2 wrapper."""

    def test_indent_filter_skips_blank_lines(self):
        """Blank lines stay empty when indenting."""
        engine = TemplateEngine()
        rendered = engine.render_string(
            "{{ value | indent(2) }}", {"value": "a\n\nb"}
        )
        assert rendered == "  a\n\n  b"

    def test_undefined_slot_raises(self):
        """Missing context variables are errors, not empty strings."""
        engine = TemplateEngine()
        with pytest.raises(TemplateError):
            engine.render_string("{{ missing }}", {})

    def test_slot_names(self):
        """slot_names lists referenced variables."""
        engine = TemplateEngine()
        assert engine.slot_names("{{ a }} {{ b | indent(c) }}") == {"a", "b", "c"}

    def test_capitalize_first_filter(self):
        """The capitalize_first filter is available in templates."""
        engine = TemplateEngine()
        rendered = engine.render_string("{{ n | capitalize_first }}", {"n": "user_roles"})
        assert rendered == "User_roles"

    @pytest.mark.parametrize(
        "value, expected",
        [("users", "Users"), ("userProfile", "UserProfile"), ("_x", "_x"), ("", "")],
    )
    def test_capitalize_first(self, value, expected):
        """Only the first character changes."""
        assert capitalize_first(value) == expected
