"""
Go profile.

Generates Go structs.
"""

from ..core.profile import BodyTemplate, LanguageProfile

GO_STRUCT_TEMPLATE = """type {{ class_name }} struct {
{{ fields | indent(indent) }}
}"""

GO_PROFILE = LanguageProfile(
    name="go",
    file_extension=".go",
    aliases=("golang",),
    integer_type="int",
    float_type="float64",
    boolean_type="bool",
    json_type="map[string]interface{}",
    array_type="[]interface{}",
    binary_type="[]byte",
    string_type="string",
    void_type="*int",
    time_type="time.Time",
    timestamp_type="time.Time",
    fallback_type="string",
    comment="//{{ text }}",
    body=BodyTemplate(GO_STRUCT_TEMPLATE),
)
