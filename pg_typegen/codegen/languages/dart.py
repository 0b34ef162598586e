"""Dart profile."""

from ..core.profile import BodyTemplate, LanguageProfile

DART_CLASS_TEMPLATE = """class {{ class_name }} {
{{ fields | indent(indent) }}
}"""

DART_PROFILE = LanguageProfile(
    name="dart",
    file_extension=".dart",
    integer_type="int",
    float_type="double",
    boolean_type="bool",
    json_type="String",
    array_type="List<dynamic>",
    binary_type="Uint8List",
    string_type="String",
    void_type="void",
    time_type="DateTime",
    timestamp_type="DateTime",
    fallback_type="String",
    comment="//{{ text }}",
    body=BodyTemplate(DART_CLASS_TEMPLATE),
)
