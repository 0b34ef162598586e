"""
TypeScript profile.

JSON columns map to ``Json``, so schema output starts with the alias
that defines it.
"""

from ..core.profile import BodyTemplate, LanguageProfile

TYPESCRIPT_TYPE_TEMPLATE = """type {{ class_name }} = {
{{ fields | indent(indent) }}
}"""

JSON_TYPE_ALIAS = (
    "export type Json = string | number | boolean | null "
    "| { [key: string]: Json | undefined } | Json[]"
)

TYPESCRIPT_PROFILE = LanguageProfile(
    name="typescript",
    file_extension=".ts",
    aliases=("ts",),
    integer_type="number",
    float_type="number",
    boolean_type="boolean",
    json_type="Json",
    array_type="Any[]",
    binary_type="Uint8Array",
    string_type="string",
    void_type="void",
    time_type="Date",
    timestamp_type="Date",
    fallback_type="Any",
    comment="//{{ text }}",
    body=BodyTemplate(TYPESCRIPT_TYPE_TEMPLATE),
    preamble=JSON_TYPE_ALIAS,
)
