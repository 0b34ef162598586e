"""Swift profile."""

from ..core.profile import BodyTemplate, LanguageProfile

SWIFT_STRUCT_TEMPLATE = """struct {{ class_name }} {
{{ fields | indent(indent) }}
}"""

SWIFT_PROFILE = LanguageProfile(
    name="swift",
    file_extension=".swift",
    integer_type="Int",
    float_type="Double",
    boolean_type="Bool",
    json_type="[String: Any]",
    array_type="[Any]",
    binary_type="Data",
    string_type="String",
    void_type="Int?",
    time_type="Date",
    timestamp_type="Date",
    fallback_type="String",
    comment="//{{ text }}",
    body=BodyTemplate(SWIFT_STRUCT_TEMPLATE),
)
