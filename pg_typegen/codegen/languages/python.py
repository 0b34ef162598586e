"""
Python profile.

Generates ``@dataclass`` classes.
"""

from ..core.profile import BodyTemplate, LanguageProfile

PYTHON_DATACLASS_TEMPLATE = """@dataclass
class {{ class_name }}:
{{ fields | indent(indent) }}"""

PYTHON_PROFILE = LanguageProfile(
    name="python",
    file_extension=".py",
    aliases=("py",),
    integer_type="int",
    float_type="float",
    boolean_type="bool",
    json_type="Dict[str, Any]",
    array_type="List[Any]",
    binary_type="bytes",
    string_type="str",
    void_type="",
    time_type="datetime.datetime",
    timestamp_type="datetime.timestamp",
    fallback_type="str",
    comment="#{{ text }}",
    body=BodyTemplate(PYTHON_DATACLASS_TEMPLATE),
)
