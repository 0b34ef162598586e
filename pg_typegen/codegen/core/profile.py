"""
Language profiles.

A profile is the immutable per-language record of primitive type
spellings plus the templates used to render comments and type bodies.
Adding a language means adding one profile; no generator code changes.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .templates import TemplateEngine, TemplateError, get_default_template_engine


class ProfileError(Exception):
    """Exception raised for malformed language profiles."""

    pass


# Names of the primitive spellings every profile must provide
PRIMITIVE_TYPES = (
    "integer_type",
    "float_type",
    "boolean_type",
    "json_type",
    "array_type",
    "binary_type",
    "string_type",
    "void_type",
    "time_type",
    "timestamp_type",
    "fallback_type",
)


@dataclass(frozen=True)
class BodyTemplate:
    """
    Class/struct template with named slots.

    ``source`` is a Jinja2 template that must reference ``class_name`` and
    ``fields``; it may also use ``indent`` (the indentation unit) to
    indent the field block. Slots are filled by rendering, so a column
    named ``fields`` or containing ``{{`` is emitted literally.
    """

    source: str

    FIELDS_SLOT = "fields"
    NAME_SLOT = "class_name"
    OPTIONAL_SLOTS = frozenset({"indent"})

    def render(
        self,
        class_name: str,
        fields: str,
        indent: str = "    ",
        engine: Optional[TemplateEngine] = None,
    ) -> str:
        """Fill the template slots."""
        engine = engine or get_default_template_engine()
        return engine.render_string(
            self.source,
            {self.NAME_SLOT: class_name, self.FIELDS_SLOT: fields, "indent": indent},
        )


@dataclass(frozen=True)
class LanguageProfile:
    """Immutable type mapping table and output templates for one language."""

    name: str
    file_extension: str

    # Primitive type spellings
    integer_type: str
    float_type: str
    boolean_type: str
    json_type: str
    array_type: str
    binary_type: str
    string_type: str
    void_type: str
    time_type: str
    timestamp_type: str
    fallback_type: str

    # Jinja2 template with a ``text`` slot, e.g. "//{{ text }}"
    comment: str
    body: BodyTemplate

    # Emitted once before all types of a schema
    preamble: Optional[str] = None
    aliases: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def needs_preamble(self) -> bool:
        """True when schema output must start with the preamble."""
        return bool(self.preamble)

    def render_comment(
        self, text: str, engine: Optional[TemplateEngine] = None
    ) -> str:
        """Render one comment line."""
        engine = engine or get_default_template_engine()
        return engine.render_string(self.comment, {"text": text})

    def primitive_types(self) -> dict:
        """Get the primitive spellings keyed by field name."""
        return {name: getattr(self, name) for name in PRIMITIVE_TYPES}


def validate_profile(
    profile: LanguageProfile, engine: Optional[TemplateEngine] = None
) -> None:
    """
    Check a profile for completeness.

    Args:
        profile: Profile to check
        engine: Template engine used to inspect template slots

    Raises:
        ProfileError: If a spelling or template slot is missing
    """
    engine = engine or get_default_template_engine()

    if not profile.name:
        raise ProfileError("Profile name must not be empty")

    for type_name in PRIMITIVE_TYPES:
        if not isinstance(getattr(profile, type_name, None), str):
            raise ProfileError(
                f"Profile '{profile.name}' must define {type_name} as a string"
            )

    if not isinstance(profile.body, BodyTemplate):
        raise ProfileError(f"Profile '{profile.name}' body must be a BodyTemplate")

    try:
        body_slots = engine.slot_names(profile.body.source)
        comment_slots = engine.slot_names(profile.comment)
    except TemplateError as e:
        raise ProfileError(f"Profile '{profile.name}' has an invalid template: {e}")

    required = {BodyTemplate.FIELDS_SLOT, BodyTemplate.NAME_SLOT}
    missing = required - body_slots
    if missing:
        raise ProfileError(
            f"Profile '{profile.name}' body template is missing slot(s): "
            f"{', '.join(sorted(missing))}"
        )

    unknown = body_slots - required - BodyTemplate.OPTIONAL_SLOTS
    if unknown:
        raise ProfileError(
            f"Profile '{profile.name}' body template uses unknown slot(s): "
            f"{', '.join(sorted(unknown))}"
        )

    if comment_slots != {"text"}:
        raise ProfileError(
            f"Profile '{profile.name}' comment template must use exactly the "
            f"'text' slot"
        )
